"""Wellness assessment domain."""
