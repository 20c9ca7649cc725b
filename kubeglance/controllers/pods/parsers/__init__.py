"""Parsers for raw pod and pod metrics documents."""

from kubeglance.controllers.pods.parsers.metrics_parser import PodMetricsParser
from kubeglance.controllers.pods.parsers.pod_parser import PodConversionError, PodParser

__all__ = ["PodConversionError", "PodMetricsParser", "PodParser"]
