from __future__ import annotations

from flask import Flask

from figma_converter.config import ConverterConfig
from figma_converter.service import CssProcessingService, ParseFn
from figma_converter.store.db import Database
from figma_converter.store.migrations import run_migrations
from figma_converter.store.repositories import ComponentRepository, JobRepository
from figma_converter.transpiler import CachingParser, InMemoryParseCache, parse


def create_app(
    db: Database | None = None,
    config: ConverterConfig | None = None,
    parse_fn: ParseFn | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or ConverterConfig()
    app = Flask(__name__)
    app.config["CONVERTER"] = config

    if db is None:
        db = Database(":memory:").connect()
        run_migrations(db)

    parser: CachingParser | None = None
    if parse_fn is None:
        if config.enable_parse_cache:
            parser = CachingParser(InMemoryParseCache(max_entries=config.parse_cache_max_entries))
            parse_fn = parser.parse
        else:
            parse_fn = parse

    job_repo = JobRepository(db)
    component_repo = ComponentRepository(db)
    app.extensions["db"] = db
    app.extensions["parser"] = parser
    app.extensions["job_repo"] = job_repo
    app.extensions["component_repo"] = component_repo
    app.extensions["css_service"] = CssProcessingService(
        job_repo,
        component_repo,
        parse_fn=parse_fn,
        max_css_length=config.max_css_length,
    )

    from figma_converter.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
