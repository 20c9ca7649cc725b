"""Data models for kubeglance."""
