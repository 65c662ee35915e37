"""Typed persistence over the single-table DynamoDB design."""
