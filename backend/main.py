import uvicorn
from umission.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "umission.application:application",
        host="0.0.0.0",
        port=settings.PORT,
        workers=settings.WORKERS,
        reload=settings.DEBUG,
    )
