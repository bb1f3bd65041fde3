# src/edital_chunker/observability/names.py

"""Standard metric names for edital-chunker observability.

Use these constants instead of hardcoded strings so dashboards keep
working when call sites move around.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"

# Counters, labelled with the accepted strategy
CHUNKING_DOCUMENTS_TOTAL = "chunking_documents_total"

# Counters, labelled with the strategy that was rejected
CHUNKING_ESCALATIONS_TOTAL = "chunking_escalations_total"


# ============================================================================
# Extraction Metrics
# ============================================================================

# Duration
EXTRACTION_DURATION = "extraction_duration"

# Counters
EXTRACTION_DOCUMENTS_TOTAL = "extraction_documents_total"
EXTRACTION_ERRORS_TOTAL = "extraction_errors_total"

# Gauges
EXTRACTION_CHARACTERS = "extraction_characters"
