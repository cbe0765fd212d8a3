"""Checkstyle report reading."""

from stylediff.report.reader import read_report

__all__ = ["read_report"]
