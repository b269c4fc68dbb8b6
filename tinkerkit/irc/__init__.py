"""Minimal line-oriented IRC client."""