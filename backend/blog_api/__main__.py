# blog_api/__main__.py
import uvicorn

from blog_api.config import settings


def main() -> None:
    uvicorn.run("blog_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
