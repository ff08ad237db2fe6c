# nhl_routes/__init__.py
from flask import Blueprint

# Create a blueprint for all NHL-related routes
nhl_bp = Blueprint("nhl", __name__)

# Import submodules so their routes automatically register
from . import scoreboard, cup
from .scoreboard import register_socketio_events
