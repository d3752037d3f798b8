# app/__main__.py

import uvicorn

from app.main import create_app


def main():
    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)


if __name__ == "__main__":
    main()
