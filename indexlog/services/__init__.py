"""
Services built on the indexlog models.

Submodules are imported directly; this package re-exports nothing so the
models can depend on services.plan_serde without import cycles.
"""
