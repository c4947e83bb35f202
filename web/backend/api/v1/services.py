from functools import lru_cache
from typing import Any, Callable, List, Optional

from langapi.common.log_utils import init_logger
from langapi.config.settings import CONFIG, TextAnalyticsConfig
from langapi.nlp.text_analytics import AzureTextAnalysisService, TextAnalysisService
from web.backend.api.v1.formatting import (
    format_entity_results,
    format_language_results,
    format_sentiment_results,
)
from web.backend.api.v1.schemas import (
    Document,
    EntityResult,
    LanguageResult,
    SentimentResult,
)

BAD_REQUEST_MESSAGE = "Bad Request (Validation Error)"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"

logger = init_logger(module_name=__name__)


class GatewayError(Exception):
    """对调用方可见的失败结果：固定的状态码与提示信息"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def translate_upstream_error(exc: Exception, operation: str) -> GatewayError:
    """
    把远程服务或格式化阶段的异常映射成 400 / 500，完整错误只写日志
    """
    if getattr(exc, "status_code", None) == 400:
        logger.error(f"[Service] {operation} 远程服务校验失败: {exc!r}")
        return GatewayError(400, BAD_REQUEST_MESSAGE)

    logger.error(f"[Service] {operation} 处理失败: {exc!r}", exc_info=exc)
    return GatewayError(500, INTERNAL_ERROR_MESSAGE)


class TextAnalysisGateway:
    def __init__(
        self,
        service: Optional[TextAnalysisService] = None,
        config: Optional[TextAnalyticsConfig] = None,
    ):
        self.config = config or TextAnalyticsConfig.from_config(
            CONFIG.get("TEXT_ANALYTICS", {})
        )
        self._service = service
        logger.info("[Service] 服务初始化完成")

    @property
    def service(self) -> TextAnalysisService:
        # 首次调用时才创建远程客户端，缺少配置在请求中报 500
        if self._service is None:
            self._service = AzureTextAnalysisService(self.config)
        return self._service

    def _run(
        self,
        operation: str,
        documents: List[Document],
        call: Callable[[List[dict]], Any],
        formatter: Callable[[List[Document], Any], list],
    ) -> list:
        logger.info(f"[Service] 开始处理 {operation}，文档 {len(documents)} 条")
        try:
            raw = call([doc.to_input() for doc in documents])
            results = formatter(documents, raw)
        except Exception as e:
            raise translate_upstream_error(e, operation) from e
        logger.info(f"[Service] {operation} 完成")
        return results

    def analyze_sentiment(self, documents: List[Document]) -> List[SentimentResult]:
        return self._run(
            "analyzeSentiment",
            documents,
            lambda inputs: self.service.analyze_sentiment(
                inputs, include_opinion_mining=self.config.include_opinion_mining
            ),
            format_sentiment_results,
        )

    def recognize_entities(self, documents: List[Document]) -> List[EntityResult]:
        return self._run(
            "recognizeEntities",
            documents,
            lambda inputs: self.service.recognize_entities(inputs),
            format_entity_results,
        )

    def detect_language(self, documents: List[Document]) -> List[LanguageResult]:
        return self._run(
            "detectLanguage",
            documents,
            lambda inputs: self.service.detect_language(inputs),
            format_language_results,
        )


@lru_cache(maxsize=1)
def get_gateway() -> TextAnalysisGateway:
    return TextAnalysisGateway()
