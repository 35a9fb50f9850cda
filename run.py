"""Unified entry point for the parolee and rabbit counter services.

Both services are started in one event loop, each as its own uvicorn
server on its own port.  Host and ports come from the environment (see
``rest_lab_api.app.core.config``); defaults are ``0.0.0.0``, ``10000``
for parolees and ``10001`` for the rabbit counter.

Usage:
    python run.py
    python run.py --only rabbit
"""
import argparse
import asyncio
import logging

from fastapi import FastAPI
from uvicorn import Config, Server

from rest_lab_api.app.core.config import settings
from rest_lab_api.app.main import parolee_app, rabbit_app


async def serve(app: FastAPI, port: int) -> None:
    """Serve ``app`` with uvicorn on ``settings.host:port``."""
    config = Config(app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main(only: str = "") -> None:
    """Run the selected services concurrently."""
    services = {
        "parolee": (parolee_app, settings.parolee_port),
        "rabbit": (rabbit_app, settings.rabbit_port),
    }
    tasks = [
        asyncio.create_task(serve(app, port))
        for name, (app, port) in services.items()
        if not only or name == only
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the REST lab services.")
    parser.add_argument("--only", choices=["parolee", "rabbit"], default="", help="Start a single service.")
    args = parser.parse_args()
    try:
        asyncio.run(main(args.only))
    except (KeyboardInterrupt, SystemExit):
        pass
