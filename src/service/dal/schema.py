"""
DynamoDB table definition for contact submissions.

The production table is provisioned by the infrastructure stack; this module
mirrors its key schema, secondary indexes and TTL setting so tests and local
development can create an identical table.
"""

from typing import Any, Dict, List

TTL_ATTRIBUTE = 'expiresAt'

KEY_SCHEMA: List[Dict[str, str]] = [
    {'AttributeName': 'id', 'KeyType': 'HASH'},
    {'AttributeName': 'submittedAt', 'KeyType': 'RANGE'},
]

ATTRIBUTE_DEFINITIONS: List[Dict[str, str]] = [
    {'AttributeName': name, 'AttributeType': 'S'}
    for name in ('id', 'submittedAt', 'email', 'subject', 'firstName', 'lastName', 'companyName')
]

# index name -> hash key, every index ranged on submittedAt
SECONDARY_INDEXES: Dict[str, str] = {
    'EmailIndex': 'email',
    'SubjectIndex': 'subject',
    'FirstNameIndex': 'firstName',
    'LastNameIndex': 'lastName',
    'CompanyIndex': 'companyName',
}


def global_secondary_indexes() -> List[Dict[str, Any]]:
    """Build the GlobalSecondaryIndexes argument for create_table."""
    return [
        {
            'IndexName': index_name,
            'KeySchema': [
                {'AttributeName': hash_key, 'KeyType': 'HASH'},
                {'AttributeName': 'submittedAt', 'KeyType': 'RANGE'},
            ],
            'Projection': {'ProjectionType': 'ALL'},
        }
        for index_name, hash_key in SECONDARY_INDEXES.items()
    ]


def create_contact_messages_table(dynamodb: Any, table_name: str) -> Any:
    """
    Create the contact submissions table and enable TTL on it.

    Args:
        dynamodb: boto3 DynamoDB service resource
        table_name: Name of the table to create

    Returns:
        The created boto3 Table resource, ready for use
    """
    table = dynamodb.create_table(
        TableName=table_name,
        KeySchema=KEY_SCHEMA,
        AttributeDefinitions=ATTRIBUTE_DEFINITIONS,
        GlobalSecondaryIndexes=global_secondary_indexes(),
        BillingMode='PAY_PER_REQUEST',
    )
    table.wait_until_exists()

    dynamodb.meta.client.update_time_to_live(
        TableName=table_name,
        TimeToLiveSpecification={'Enabled': True, 'AttributeName': TTL_ATTRIBUTE},
    )
    return table
