"""Reusable tree walking, matching and reporting for the guards."""
