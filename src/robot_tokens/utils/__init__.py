"""Shared utilities with no dependency on other robot-tokens layers."""
