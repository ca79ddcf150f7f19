"""OpenTelemetry semantic conventions for ledger SLO measurements.

Defines attribute keys and metric names following OTEL naming conventions.
All attributes are prefixed with 'ledger.slo.' to avoid collisions with
standard OTEL conventions.
"""

# --- Attribute Keys ---

SLO_LABEL = "ledger.slo.label"
SLO_DESCRIPTION = "ledger.slo.description"
SLO_TARGET = "ledger.slo.target"
SLO_WINDOW = "ledger.slo.window"

# --- Metric Names ---

METRIC_SUCCESS_RATE = "ledger.slo.success_rate"
METRIC_EVENT_COUNT = "ledger.slo.event_count"
METRIC_ERROR_BUDGET_REMAINING = "ledger.slo.error_budget.remaining"
METRIC_ERROR_BUDGET_CONSUMED = "ledger.slo.error_budget.consumed"
METRIC_COMPLIANT = "ledger.slo.compliant"
METRIC_SHOULD_ALERT = "ledger.slo.should_alert"
METRIC_REPORT_COMPLIANT = "ledger.slo.report.compliant"
METRIC_REPORT_NEEDS_ATTENTION = "ledger.slo.report.needs_attention"
