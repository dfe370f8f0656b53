"""Backends implementing the TaskApi port."""
