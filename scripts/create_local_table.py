#!/usr/bin/env python3
"""
Create the contact submissions table on a local DynamoDB endpoint.

Usage:
    python scripts/create_local_table.py --endpoint-url http://localhost:8000
"""
import argparse
import sys
from pathlib import Path

import boto3

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from service.dal.schema import create_contact_messages_table
from service.handlers.models.env_vars import DEFAULT_TABLE_NAME


def main():
    """Create the table unless it already exists"""
    parser = argparse.ArgumentParser(description="Create the contact submissions table locally")
    parser.add_argument("--endpoint-url", default="http://localhost:8000", help="DynamoDB endpoint URL")
    parser.add_argument("--table-name", default=DEFAULT_TABLE_NAME, help="Table name to create")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    dynamodb = boto3.resource("dynamodb", endpoint_url=args.endpoint_url, region_name=args.region)

    existing = dynamodb.meta.client.list_tables()["TableNames"]
    if args.table_name in existing:
        print(f"Table {args.table_name} already exists at {args.endpoint_url}")
        return

    table = create_contact_messages_table(dynamodb, args.table_name)
    print(f"Created table {table.table_name} at {args.endpoint_url}")


if __name__ == "__main__":
    main()
