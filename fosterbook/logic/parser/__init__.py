"""Parsers turning prefixed argument strings into commands."""
