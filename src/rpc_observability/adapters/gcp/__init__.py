"""GCP adapter – Cloud Logging sink."""
from rpc_observability.adapters.gcp.logging_sink import CloudSeverity, GcpLogSink, cloud_severity

__all__ = ["CloudSeverity", "GcpLogSink", "cloud_severity"]
