"""ZZP billing API entrypoint.

Runs behind the authentication gateway, which sets the X-Principal-* headers
and forwards the client address.
"""

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)


def main():
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=ApplicationConfig.API_RELOAD,
        proxy_headers=True,
        forwarded_allow_ips=ApplicationConfig.FORWARDED_ALLOW_IPS,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
