"""Parsing of generative model responses into word definitions, comparisons and synonym sets."""

__version__ = "0.1.0"
