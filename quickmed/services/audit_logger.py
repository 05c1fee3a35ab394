import logging
from typing import Dict, Any, Optional

logger = logging.getLogger("AnalysisAudit")

MAX_RAW_OUTPUT = 500

class AuditLogger:
    @staticmethod
    def log_action(correlation_id: Optional[str], action: str, metadata: Dict[str, Any]):
        raw = metadata.get("raw_output")
        if isinstance(raw, str) and len(raw) > MAX_RAW_OUTPUT:
            metadata = {**metadata, "raw_output": raw[:MAX_RAW_OUTPUT] + "..."}
        logger.info(f"AUDIT_ACTION: {action} | Correlation: {correlation_id}", extra={"audit": metadata})
