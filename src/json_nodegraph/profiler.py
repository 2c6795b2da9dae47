"""Performance profiler for encode and decode calls."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one codec operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_peak_mb: float
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float
    nodes_processed: int


class PerformanceProfiler:
    """
    Profiler measuring duration, memory and throughput of codec calls.

    Memory figures are the resident set size of the current process as
    reported by psutil.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.peak_memory: float = 0
        self.input_size = 0
        self.output_size = 0
        self.nodes_processed = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0):
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
            input_size: Size of input data in bytes
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.output_size = 0
        self.nodes_processed = 0

        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def record_output(self, output_size: int = 0, nodes_processed: int = 0):
        """Record the size of what the current operation produced."""
        self.output_size = output_size
        self.nodes_processed = nodes_processed
        self.sample_performance()

    def sample_performance(self):
        """Sample current memory usage."""
        if not self.current_operation:
            return

        try:
            self.peak_memory = max(self.peak_memory, self._current_memory_mb())
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")

    def stop_profiling(self) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.perf_counter()
        duration = end_time - self.start_time

        try:
            end_memory = self._current_memory_mb()
        except psutil.Error:
            end_memory = self.start_memory
        self.peak_memory = max(self.peak_memory, end_memory)

        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=self.output_size,
            memory_peak_mb=self.peak_memory,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            throughput_mbps=throughput,
            nodes_processed=self.nodes_processed
        )

        self.metrics_history.append(metrics)

        self.logger.debug(f"Performance Summary - {self.current_operation}:")
        self.logger.debug(f"  Duration: {duration * 1000:.2f}ms")
        self.logger.debug(f"  Throughput: {throughput:.2f} MB/s")
        self.logger.debug(f"  Memory Peak: {self.peak_memory:.1f} MB")
        self.logger.debug(f"  Nodes Processed: {self.nodes_processed}")

        self.current_operation = None
        self.start_time = None
        self.start_memory = None

        return metrics

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        count = len(self.metrics_history)
        return {
            "total_operations": count,
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_nodes_processed": sum(m.nodes_processed for m in self.metrics_history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in self.metrics_history) / count,
            "max_memory_peak_mb": max(m.memory_peak_mb for m in self.metrics_history),
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "nodes": m.nodes_processed
                }
                for m in self.metrics_history
            ]
        }

    @staticmethod
    def _current_memory_mb() -> float:
        return psutil.Process().memory_info().rss / 1024 / 1024
