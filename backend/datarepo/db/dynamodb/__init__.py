"""Shared DynamoDB utilities.

This package centralizes:
- boto3 resource configuration
- the store client used by repositories (point lookups, paged queries, writes)
- range-query operator mapping
- classification of botocore failures into repository results

"""
