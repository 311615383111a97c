"""Tests for the section controller."""
