from prometheus_client import Counter

STORE_OPERATIONS = Counter(
    "inventory_store_operations_total",
    "Total number of product store operations",
    ["operation", "outcome"],
)

INVALID_INPUT = Counter(
    "inventory_invalid_input_total",
    "Total number of rejected user inputs",
    ["field"],
)
