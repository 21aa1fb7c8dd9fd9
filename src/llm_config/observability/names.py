# src/llm_config/observability/names.py

"""Standard metric names for llm-config observability.

Use these constants instead of hardcoded strings.
"""

# Counters
LLM_CONFIG_LOADS_TOTAL = "llm_config_loads_total"
LLM_CONFIG_ERRORS_TOTAL = "llm_config_errors_total"
