import uvicorn
from cretaceous_park.config import get_settings

# Запуск FastAPI-сервера
uvicorn.run(
    'cretaceous_park.app:app',
    reload=get_settings().reload,
    host=get_settings().app_host,
    port=get_settings().app_port,
    workers=1
)
