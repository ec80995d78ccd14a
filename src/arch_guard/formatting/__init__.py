"""
Report Formatter

This module renders rule violations and AI findings into the Markdown
body of the pull request comment.
"""

from .markdown import ReportBuilder

__all__ = ['ReportBuilder']
