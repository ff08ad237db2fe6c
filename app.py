# app.py
if __name__ == "__main__":
    import eventlet
    eventlet.monkey_patch()

import os
from flask import Flask
from flask_socketio import SocketIO
from nhl_routes import nhl_bp, register_socketio_events
from utils import TH1, TH2, TH3, alpha


def create_app(async_mode=None):
    app = Flask(__name__)
    app.register_blueprint(nhl_bp)

    @app.route("/")
    def home():
        html = f"""<!DOCTYPE html><html>
    <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width,initial-scale=1">
    <title>NHL</title>
    <style>
      body {{
        font-family:sans-serif;
        text-align:center;
        background:{TH3};
        color:{TH2};
        height:100vh;
        margin:0;
        display:flex;
        flex-direction:column;
        justify-content:center;
      }}
      a {{
        display:block;
        margin:1em auto;
        padding:1em 2em;
        width:160px;
        background:{alpha(TH1, 0.8)};
        color:{TH2};
        text-decoration:none;
        border-radius:7px;
        font-weight:bold;
        font-size: clamp(20px, 3vw, 22px);
      }}
      a:active {{ background:{TH2}; }}
    </style>
    </head>
    <body>
      <a href="/nhl">Games Today</a>
      <a href="/nhl/cup">In-Season Cup</a>
    </body>
    </html>"""
        return html

    socketio = SocketIO(app, cors_allowed_origins="*", async_mode=async_mode)
    register_socketio_events(socketio)
    return app, socketio


def main():
    app, socketio = create_app()
    socketio.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8080")))


if __name__ == "__main__":
    main()
