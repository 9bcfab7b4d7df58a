from app.processor.models import DocumentKind, ExtractionAttempt, StrategyId

_SERVICE_CASCADE = (
    StrategyId.DOCUMENT_UNDERSTANDING_SERVICE,
    StrategyId.PLACEHOLDER_DESCRIPTION,
)

# Office documents have a single extractor and no fallback.
STRATEGY_TABLE: dict[DocumentKind, tuple[StrategyId, ...]] = {
    DocumentKind.OFFICE_DOCUMENT: (StrategyId.OFFICE_TEXT_EXTRACTOR,),
    DocumentKind.PDF: _SERVICE_CASCADE,
    DocumentKind.IMAGE: _SERVICE_CASCADE,
    DocumentKind.HTML: (StrategyId.HTML_TEXT_EXTRACTOR,),
    DocumentKind.PLAIN_TEXT: (StrategyId.RAW_PASSTHROUGH,),
    DocumentKind.UNKNOWN: _SERVICE_CASCADE,
}


def select_strategies(kind: DocumentKind) -> list[ExtractionAttempt]:
    """Return the ordered extraction cascade for *kind*."""
    return [
        ExtractionAttempt(strategy_id=strategy_id, ordinal=ordinal)
        for ordinal, strategy_id in enumerate(STRATEGY_TABLE.get(kind, ()))
    ]
