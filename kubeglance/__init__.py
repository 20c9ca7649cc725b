"""kubeglance - pod status classification and resource metrics for pod tables."""

__version__ = "0.1.0"
