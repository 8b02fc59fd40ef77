from enum import Enum
from typing import Any, Dict
from datetime import datetime, timezone

class ErrorCode(str, Enum):
    """Standardized error codes for the application"""

    VALIDATION_ERROR = "VAL_1201"

    RESOURCE_NOT_FOUND = "RES_1301"

    INTERNAL_ERROR = "SYS_1401"

ERROR_DETAILS: Dict[ErrorCode, Dict[str, Any]] = {
    ErrorCode.VALIDATION_ERROR: {
        "message": "Request data failed validation",
        "http_status": 400,
    },
    ErrorCode.RESOURCE_NOT_FOUND: {
        "message": "The requested resource was not found",
        "http_status": 404,
    },
}

def get_http_status(error_code: ErrorCode) -> int:
    return ERROR_DETAILS.get(error_code, {}).get("http_status", 500)

def get_error_response(error_code: ErrorCode, details: Any = None) -> Dict[str, Any]:
    """Get standardized error response"""
    error_info = ERROR_DETAILS.get(error_code, {
        "message": "An error occurred",
        "http_status": 500,
    })

    return {
        "error": {
            "code": error_code.value,
            "message": error_info["message"],
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    }
