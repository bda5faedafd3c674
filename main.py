"""Main entry point for Model Arena."""

from model_arena.app import ModelArenaApp
from model_arena.shared.config import Config


# Create application instance
app_instance = ModelArenaApp()
app = app_instance.app


if __name__ == "__main__":
    import uvicorn

    server_config = Config()
    uvicorn.run(app, host=server_config.server_host, port=server_config.server_port)
