from __future__ import annotations

from flask import Flask

from gcsst.oracle import SpellOracle, is_recognized_spell


def create_app(
    config: dict | None = None,
    oracle: SpellOracle = is_recognized_spell,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # Routes read the spell oracle from here so tests can swap it.
    app.extensions["spell_oracle"] = oracle

    from gcsst.web.routes.api import api_bp

    app.register_blueprint(api_bp)

    return app
