"""Result sinks collecting or forwarding enumerated structures."""

import logging
from typing import Callable, List

from ..interfaces.result_sink import ResultSink
from ..models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


class ListResultSink(ResultSink):
    """Keep every structure in memory, in emission order."""

    def __init__(self) -> None:
        self.structures: List[MolecularGraph] = []

    def handle(self, graph: MolecularGraph) -> None:
        self.structures.append(graph)

    def __len__(self) -> int:
        return len(self.structures)


class CallbackResultSink(ResultSink):
    """Forward each structure to a plain callable."""

    def __init__(self, callback: Callable[[MolecularGraph], None]):
        self._callback = callback

    def handle(self, graph: MolecularGraph) -> None:
        self._callback(graph)


class LoggingResultSink(ResultSink):
    """Log each structure as it is found and count them."""

    def __init__(self, level: int = logging.INFO):
        self.level = level
        self.count = 0

    def handle(self, graph: MolecularGraph) -> None:
        self.count += 1
        logger.log(self.level, f"Structure {self.count}: {graph!r}")
