"""Metric model and text exposition rendering."""

import re
from enum import Enum
from typing import Dict, List, Optional, Tuple

_NAME_RE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')


class MetricKind(Enum):
    """Exposition type token for a metric."""

    COUNTER = 'counter'
    GAUGE = 'gauge'
    UNTYPED = 'untyped'


def escape_label_value(value: str) -> str:
    """Escape backslash, double quote and newline for a quoted label value."""
    return value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')


class Metric:
    """One named series and the samples taken for it during a scrape.

    Samples are kept in insertion order and so are the labels inside each
    sample, so rendering a fixed set of samples always gives the same text.
    """

    def __init__(self, name: str, kind: MetricKind):
        if not _NAME_RE.match(name):
            raise ValueError(f'Invalid metric name: {name!r}')
        self.name = name
        self.kind = kind
        self._samples: List[Tuple[Tuple[Tuple[str, str], ...], str]] = []

    @property
    def samples(self) -> list:
        return list(self._samples)

    def add(self, value: str, labels: Optional[Dict[str, str]] = None) -> 'Metric':
        """Append a sample. Returns self so calls can be chained."""
        label_set = tuple((labels or {}).items())
        for key, _ in label_set:
            if not _NAME_RE.match(key):
                raise ValueError(f'Invalid label name for {self.name}: {key!r}')
        if any(existing == label_set for existing, _ in self._samples):
            raise ValueError(f'Duplicate label set for {self.name}: {dict(label_set)}')
        self._samples.append((label_set, str(value)))
        return self

    def render(self) -> str:
        lines = [f'# TYPE {self.name} {self.kind.value}']
        for label_set, value in self._samples:
            if label_set:
                labels = ','.join(f'{k}="{escape_label_value(v)}"' for k, v in label_set)
                lines.append(f'{self.name}{{{labels}}} {value}')
            else:
                lines.append(f'{self.name} {value}')
        return '\n'.join(lines) + '\n'


def gauge(name: str) -> Metric:
    return Metric(name, MetricKind.GAUGE)


def counter(name: str) -> Metric:
    return Metric(name, MetricKind.COUNTER)
