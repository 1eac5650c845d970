"""Static dictionary site generation library.

Subpackages:
- dictsite.common: Shared utilities (config, errors, logging, utils)
- dictsite.input: Input processing (loading cedict.json entries)
- dictsite.output: Output generation (pages, index, bounded render pipeline)
"""
