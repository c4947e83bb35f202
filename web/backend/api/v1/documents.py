# web/backend/api/v1/documents.py
from typing import Any, List, Union

from fastapi import APIRouter, Body, Depends

from web.backend.api.v1.schemas import (
    Document,
    EntityResult,
    ErrorResponse,
    LanguageResult,
    SentimentResult,
    ValidationErrorResponse,
)
from web.backend.api.v1.services import TextAnalysisGateway, get_gateway
from web.backend.api.v1.validation import require_documents

router = APIRouter(tags=["Document"])

# 请求体在路由里手动校验（需要汇总全部错误），这里只负责文档展示
DOCUMENTS_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {"type": "array", "items": Document.model_json_schema()},
                "example": [
                    {"id": "1", "text": "The food was great but the service was slow.", "language": "en"}
                ],
            }
        },
    }
}

ERROR_RESPONSES = {
    400: {"model": Union[ValidationErrorResponse, ErrorResponse], "description": "Bad Request"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
}


@router.post(
    "/analyzeSentiment",
    response_model=List[SentimentResult],
    summary="Analyze the sentiment of submitted text. Is it positive, negative, neutral or mixed?",
    description="Results return a sentiment (positive, negative, neutral or mixed) "
    "and mined opinions. Passing a language is optional.",
    responses=ERROR_RESPONSES,
    openapi_extra=DOCUMENTS_BODY,
)
def analyze_sentiment(
    payload: Any = Body(default=None),
    gateway: TextAnalysisGateway = Depends(get_gateway),
):
    documents = require_documents(payload)
    return gateway.analyze_sentiment(documents)


@router.post(
    "/recognizeNamedEntity",
    response_model=List[EntityResult],
    summary="Recognize the named entities in submitted text. Is it a location? Maybe a building?",
    description="Results return recognized named entities along with confidence scores. "
    "Passing a language is optional.",
    responses=ERROR_RESPONSES,
    openapi_extra=DOCUMENTS_BODY,
)
def recognize_named_entity(
    payload: Any = Body(default=None),
    gateway: TextAnalysisGateway = Depends(get_gateway),
):
    documents = require_documents(payload)
    return gateway.recognize_entities(documents)


@router.post(
    "/detectLanguage",
    response_model=List[LanguageResult],
    summary="Detect the language of submitted text.",
    description="Results return the detected language along with its ISO 639-1 name "
    "and the service's confidence score.",
    responses=ERROR_RESPONSES,
    openapi_extra=DOCUMENTS_BODY,
)
def detect_language(
    payload: Any = Body(default=None),
    gateway: TextAnalysisGateway = Depends(get_gateway),
):
    documents = require_documents(payload)
    return gateway.detect_language(documents)
