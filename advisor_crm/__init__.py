"""Advisor CRM task list application."""
