# gordle.py
import argparse, sys
from names import gordle_guesses, opening_pairs


def main(argv=None):
    parser = argparse.ArgumentParser(description="Guess helper for five-letter NHL surnames")
    parser.add_argument("--valid-letters", default="", help="letters known to be in the name")
    parser.add_argument("--bad-letters", default="", help="letters known not to be in the name")
    parser.add_argument("--placed-letters", default="",
                        help="five-char pattern of known positions, '.' for unknown (e.g. ..k.o)")
    args = parser.parse_args(argv)

    if not (args.valid_letters or args.bad_letters or args.placed_letters):
        for best, other in opening_pairs():
            print(f"{best}, {other}")
        return 0

    try:
        guesses = gordle_guesses(args.valid_letters, args.bad_letters, args.placed_letters)
    except ValueError as e:
        parser.error(str(e))
    print(f"guesses ({len(guesses)}):")
    for name in guesses:
        print(f"  {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
