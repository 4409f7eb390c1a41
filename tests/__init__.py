"""Tests for sshkeys."""
