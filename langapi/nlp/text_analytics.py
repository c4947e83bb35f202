from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from azure.ai.textanalytics import TextAnalyticsClient
from azure.core.credentials import AzureKeyCredential

from langapi.common.log_utils import init_logger
from langapi.common.timing_utils import timeit
from langapi.config.settings import TextAnalyticsConfig

DocumentInput = Dict[str, str]


class TextAnalysisService(ABC):
    """
    远程 NLP 服务的抽象接口

    每个方法接收 ``{"id", "text", "language"?}`` 形式的文档列表，
    返回与输入位置一一对应的原始结果列表。
    """

    @abstractmethod
    def analyze_sentiment(
        self, documents: Sequence[DocumentInput], include_opinion_mining: bool = True
    ) -> List[Any]:
        """情感分析（可选观点挖掘）"""

    @abstractmethod
    def recognize_entities(self, documents: Sequence[DocumentInput]) -> List[Any]:
        """命名实体识别"""

    @abstractmethod
    def detect_language(self, documents: Sequence[DocumentInput]) -> List[Any]:
        """语种检测"""


class AzureTextAnalysisService(TextAnalysisService):
    """
    基于 Azure AI Language (Text Analytics) 的远程 NLP 服务

    不做重试，SDK 抛出的异常（HttpResponseError 等）原样向上传递。
    """

    def __init__(
        self,
        config: TextAnalyticsConfig,
        client: Optional[TextAnalyticsClient] = None,
    ):
        self.name = "Azure Text Analytics"
        self.config = config
        self.logger = init_logger(module_name=str(self.__class__.__name__))
        if client is None:
            config.check()
            client = TextAnalyticsClient(
                endpoint=config.endpoint,
                credential=AzureKeyCredential(config.api_key),
            )
        self.client = client
        self.logger.info(f"[TextAnalytics] 客户端初始化完成: {config.endpoint}")

    @staticmethod
    def _language_inputs(documents: Sequence[DocumentInput]) -> List[DocumentInput]:
        inputs = []
        for doc in documents:
            item = {"id": doc["id"], "text": doc["text"]}
            if doc.get("language"):
                item["language"] = doc["language"]
            inputs.append(item)
        return inputs

    @timeit
    def analyze_sentiment(
        self, documents: Sequence[DocumentInput], include_opinion_mining: bool = True
    ) -> List[Any]:
        self.logger.info(f"[TextAnalytics] 情感分析，文档 {len(documents)} 条")
        return self.client.analyze_sentiment(
            self._language_inputs(documents),
            show_opinion_mining=include_opinion_mining,
        )

    @timeit
    def recognize_entities(self, documents: Sequence[DocumentInput]) -> List[Any]:
        self.logger.info(f"[TextAnalytics] 实体识别，文档 {len(documents)} 条")
        return self.client.recognize_entities(self._language_inputs(documents))

    @timeit
    def detect_language(self, documents: Sequence[DocumentInput]) -> List[Any]:
        self.logger.info(f"[TextAnalytics] 语种检测，文档 {len(documents)} 条")
        # 语种检测只接受 id / text（以及 country_hint），language 提示不适用
        inputs = [{"id": doc["id"], "text": doc["text"]} for doc in documents]
        return self.client.detect_language(inputs)
