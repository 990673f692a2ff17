import uvicorn

from products_api.config import settings
from products_api.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
