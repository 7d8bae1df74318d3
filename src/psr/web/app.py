from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse
import uvicorn

from ..config import Config, load_config, load_store
from ..errors import NoRulesDefined, RecursionLimitExceeded
from ..generator import Generator
from ..rules import RuleStore

LOG = logging.getLogger(__name__)


class StoreManager:
    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path
        self._config: Optional[Config] = None
        self._store: Optional[RuleStore] = None

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = load_config(self._config_path)
        return self._config

    def get_store(self, reload: bool = False) -> RuleStore:
        if reload or self._store is None:
            # Re-read the config too so edited file lists are picked up.
            self._config = load_config(self._config_path)
            self._store = load_store(self._config.psr.files)
            LOG.debug("loaded %d rules from %s", len(self._store), self._config_path)
        return self._store


def create_app(config_path: Path) -> FastAPI:
    manager = StoreManager(config_path)

    app = FastAPI(title="PSR Phrase Generator", version="0.1.0")

    @app.get("/api/generate")
    async def generate(
        rule: Optional[str] = None,
        count: int = Query(1, ge=1, le=1000),
        seed: Optional[int] = None,
        reload: Optional[int] = None,
    ) -> JSONResponse:
        store = manager.get_store(reload=bool(reload))
        settings = manager.config.psr
        if rule is None:
            rule = settings.rule
        generator = Generator(
            store,
            rng=random.Random(seed if seed is not None else settings.seed),
            recursion_limit=settings.recursion_limit,
        )
        try:
            results = [generator.generate(rule) for _ in range(count)]
        except NoRulesDefined as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except RecursionLimitExceeded as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except RecursionError as exc:
            raise HTTPException(status_code=422, detail="Rule expansion recursed too deeply.") from exc
        return JSONResponse({"rule": rule if rule is not None else store.starting_rule, "results": results})

    @app.get("/api/rules")
    async def get_rules(reload: Optional[int] = None) -> JSONResponse:
        store = manager.get_store(reload=bool(reload))
        rules = {
            rule.name: [{"weight": option.weight, "value": option.value} for option in rule.values]
            for rule in store
        }
        return JSONResponse({"starting_rule": store.starting_rule, "rules": rules})

    @app.get("/api/dump", response_class=PlainTextResponse)
    async def get_dump(reload: Optional[int] = None) -> PlainTextResponse:
        return PlainTextResponse(manager.get_store(reload=bool(reload)).dump())

    return app


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Serve PSR phrase generation over HTTP.")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("psr.toml"),
        help="Path to the PSR configuration file.",
    )
    parser.add_argument("--host", default=None, help="Host interface to bind.")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on.")
    args = parser.parse_args(argv)

    config_path = args.config.resolve()
    web = load_config(config_path).web
    app = create_app(config_path)
    uvicorn.run(
        app,
        host=args.host if args.host is not None else web.host,
        port=args.port if args.port is not None else web.port,
    )


if __name__ == "__main__":
    main()
