"""
resume_roaster - rule-based résumé text parsing for the résumé roasting tool

Turns loosely formatted Markdown / plain-text résumés (Chinese or English)
into a normalized document model that template renderers can consume directly.

Architecture:
- Intake Context: line classification, field extraction, section accumulation, defaulting
- Templating Context: post-parse transforms consumed by renderers (polished
  highlight override, tech keyword emphasis)
"""

__version__ = "0.1.0"
