import uvicorn

from trailio.api.app import app
from trailio.core.logger import log_startup_info, logger
from trailio.core.models import settings


def run_with_uvicorn():
    """Serve the add-on until interrupted"""
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.FASTAPI_HOST,
            port=settings.FASTAPI_PORT,
            proxy_headers=True,
            forwarded_allow_ips="*",
            log_config=None,
        )
    )

    log_startup_info(settings)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.log("TRAILIO", "Stopped by user")
    finally:
        logger.log("TRAILIO", f"{settings.ADDON_NAME} shut down")


if __name__ == "__main__":
    run_with_uvicorn()
