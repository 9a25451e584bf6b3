# -*- coding: utf-8 -*-
"""Transliteration between Brahmic scripts and roman schemes for Sanskrit."""

__version__ = '0.1.0'
