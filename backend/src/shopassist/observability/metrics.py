"""Prometheus metrics for the shop assistant.

Defines and exposes operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter, Histogram

# Search metrics
search_requests_total = Counter(
    "shopassist_search_requests_total",
    "Total product searches",
    ["mode", "outcome"]  # mode: text|image, outcome: success|empty|provider_failure|not_found
)

search_duration_seconds = Histogram(
    "shopassist_search_duration_seconds",
    "End-to-end search latency in seconds",
    ["mode"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]
)

search_result_count = Histogram(
    "shopassist_search_result_count",
    "Number of products returned per search",
    ["mode"],
    buckets=[0, 1, 2, 3, 5, 8, 10]
)

# Embedding provider metrics
provider_calls_total = Counter(
    "shopassist_provider_calls_total",
    "Total embedding provider calls",
    ["call_type", "status"]  # call_type: embedding|caption, status: success|error
)

provider_latency_ms = Histogram(
    "shopassist_provider_latency_ms",
    "Embedding provider call latency in milliseconds",
    ["call_type"],
    buckets=[50, 100, 250, 500, 1000, 2500, 5000, 10000, 30000]
)

# Tool-call metrics
tool_invocations_total = Counter(
    "shopassist_tool_invocations_total",
    "Total voice-agent tool invocations",
    ["tool", "outcome"]  # outcome: success|<error code>
)
