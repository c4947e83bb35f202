# -*- coding: utf-8 -*-
# web/backend/main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from langapi.common.log_utils import init_logger, setup_logger
from langapi.config.settings import CONFIG
from web.backend.api.v1.documents import router as documents_router
from web.backend.api.v1.services import GatewayError
from web.backend.api.v1.validation import DocumentValidationError

WEB_CONFIG = CONFIG.get("WEB", {})
LOG_CONFIG = CONFIG.get("LOGGING", {})

setup_logger(level=LOG_CONFIG.get("level", "INFO"), log_dir=LOG_CONFIG.get("log_dir"))
logger = init_logger(module_name=__name__)


app = FastAPI(
    title=WEB_CONFIG.get("title", "Language Analysis API"),
    description=WEB_CONFIG.get("description"),
    version=WEB_CONFIG.get("version", "1.0.0"),
)

# CORS（前后端分离）
app.add_middleware(
    CORSMiddleware,
    allow_origins=WEB_CONFIG.get("cors_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DocumentValidationError)
def document_validation_handler(request: Request, exc: DocumentValidationError):
    logger.info(f"[API] {request.url.path} 请求校验失败: {exc}")
    return JSONResponse(
        status_code=400,
        content={"errors": [f.model_dump() for f in exc.failures]},
    )


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    # 请求体不是合法 JSON 等情况，统一按 400 返回
    logger.info(f"[API] {request.url.path} 请求体解析失败: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "errors": [
                {"rule": "NotAnArray", "field": None, "msg": str(e.get("msg")), "location": "body"}
                for e in exc.errors()
            ]
        },
    )


@app.exception_handler(GatewayError)
def gateway_error_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(documents_router)


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"[API] Server is running at http://{WEB_CONFIG['host']}:{WEB_CONFIG['port']}"
    )
    uvicorn.run(app, host=WEB_CONFIG["host"], port=WEB_CONFIG["port"], log_config=None)
