"""Chart registry.

Maps logical chart type names to builder callables so the hosting shell
asks for a chart by name without knowing about the backend.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, Tuple
import hashlib
import json
import logging

from .backends import MatplotlibChartBackend
from .types import ChartRequest, ChartResult

log = logging.getLogger(__name__)

ChartBuilder = Callable[[ChartRequest, MatplotlibChartBackend], ChartResult]


@dataclass
class ChartType:
    """Metadata for a registered chart type."""

    chart_type: str
    builder: ChartBuilder
    description: str


class ChartRegistry:
    def __init__(self, backend: MatplotlibChartBackend | None = None) -> None:
        self._types: Dict[str, ChartType] = {}
        self._backend = backend or MatplotlibChartBackend()
        self._snapshot_cache: "OrderedDict[str, Tuple[ChartResult, float]]" = OrderedDict()
        self._snapshot_cache_limit = 32  # simple LRU size

    @property
    def backend(self) -> MatplotlibChartBackend:
        return self._backend

    def register(self, chart_type: str, builder: ChartBuilder, description: str) -> None:
        if chart_type in self._types:
            raise ValueError(f"Chart type already registered: {chart_type}")
        self._types[chart_type] = ChartType(chart_type, builder, description)

    def build(self, req: ChartRequest) -> ChartResult:
        """Eagerly build the requested chart and record build duration (ms)."""
        ct = self._types.get(req.chart_type)
        if ct is None:
            raise KeyError(f"Unknown chart type: {req.chart_type}")
        start = perf_counter()
        result = ct.builder(req, self._backend)
        elapsed = (perf_counter() - start) * 1000.0
        result.meta.setdefault("build_ms", elapsed)
        log.debug("built %s in %.1f ms", req.chart_type, elapsed)
        return result

    def build_cached(self, req: ChartRequest) -> ChartResult:
        """Return chart using snapshot cache if an identical request was seen.

        Cache key derived from chart_type + JSON of data/options (stable sort keys).
        """
        key_material = {
            "type": req.chart_type,
            "data": req.data,
            "options": req.options,
        }
        try:
            payload = json.dumps(key_material, sort_keys=True, default=repr)
        except (TypeError, ValueError):
            return self.build(req)
        key = hashlib.sha256(payload.encode("utf-8")).hexdigest()
        if key in self._snapshot_cache:
            result, _ts = self._snapshot_cache[key]
            self._snapshot_cache.move_to_end(key)
            # Copy meta so earlier callers keep their own cache_hit flag
            return ChartResult(widget=result.widget, meta={**result.meta, "cache_hit": True})
        result = self.build(req)
        result.meta.setdefault("cache_hit", False)
        self._snapshot_cache[key] = (result, perf_counter())
        if len(self._snapshot_cache) > self._snapshot_cache_limit:
            self._snapshot_cache.popitem(last=False)  # evict LRU
        return result

    def clear_cache(self) -> None:
        self._snapshot_cache.clear()

    def list_types(self) -> Dict[str, str]:
        return {k: v.description for k, v in self._types.items()}


chart_registry = ChartRegistry()


def register_chart_type(chart_type: str, builder: ChartBuilder, description: str) -> None:
    chart_registry.register(chart_type, builder, description)
