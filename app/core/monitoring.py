import time
import functools
import logging
from typing import Any, Callable, Dict, Optional
from enum import Enum

logger = logging.getLogger(__name__)


class MetricType(str, Enum):
    COUNTER = "counter"
    HISTOGRAM = "histogram"


class Monitoring:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._metrics_registry = {}
        self._initialized = True

    def record_metric(
        self,
        name: str,
        value: float = 1.0,
        metric_type: MetricType = MetricType.COUNTER,
        tags: Optional[Dict[str, str]] = None,
    ):
        if tags is None:
            tags = {}

        metric_key = name
        if tags:
            metric_key = f"{name}_{'_'.join(f'{k}_{v}' for k, v in sorted(tags.items()))}"

        if metric_type == MetricType.COUNTER:
            self._metrics_registry[metric_key] = self._metrics_registry.get(metric_key, 0) + value
        elif metric_type == MetricType.HISTOGRAM:
            self._metrics_registry.setdefault(metric_key, []).append(value)

        logger.debug(f"Metric recorded: {metric_key}={value} ({metric_type.value})")

    def get_metrics(self) -> Dict[str, Any]:
        return self._metrics_registry.copy()

    def clear_metrics(self):
        self._metrics_registry.clear()


monitoring = Monitoring()


def _monitor(prefix: str, operation_name: str):
    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                monitoring.record_metric(
                    name=f"{prefix}_{operation_name}_calls",
                    tags={"status": "success"}
                )
                return result
            except Exception as e:
                monitoring.record_metric(
                    name=f"{prefix}_{operation_name}_calls",
                    tags={"status": "error", "error": type(e).__name__}
                )
                raise
            finally:
                monitoring.record_metric(
                    name=f"{prefix}_{operation_name}_duration",
                    value=time.time() - start_time,
                    metric_type=MetricType.HISTOGRAM
                )

        return wrapper
    return decorator


def monitor_service_call(service_name: str):
    return _monitor("service", service_name)


def monitor_db_operation(operation_name: str):
    return _monitor("db", operation_name)


__all__ = [
    'Monitoring',
    'monitoring',
    'MetricType',
    'monitor_service_call',
    'monitor_db_operation',
]
