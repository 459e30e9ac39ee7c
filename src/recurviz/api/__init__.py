"""HTTP API for driving playback sessions from a browser front end."""
