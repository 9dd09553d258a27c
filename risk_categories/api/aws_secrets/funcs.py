"""
Secrets Manager Utilities — Client Init • Secret Retrieval
==========================================================

Purpose
-------
Small helper module for reading the database credentials from AWS Secrets Manager:
- Initialize a Secrets Manager client for a region
- Fetch and decode the current version of a JSON secret

Configuration (from `risk_categories.database.config.config.settings`)
----------------------------------------------------------------------
- DB_SECRET_NAME : secret id (e.g. ``service/db/risk_categories_readwriteany``)

Credentials for the AWS call itself come from the default boto3 chain
(instance/task role, environment, shared profile).

Expected secret shape
---------------------
.. code-block:: json

    {"username": "...", "password": "...", "DB_CONNECTION": "host:5432/risk_categories"}

Security Notes
--------------
- Never log the secret or any URL built from it.
"""

import json
from typing import Optional

import boto3

from risk_categories.database.config.config import settings


def get_client(region: str):
    """
    Initialize and return a Secrets Manager client.

    Args:
        region (str): AWS region holding the secret.

    Returns:
        botocore.client.SecretsManager: client ready for `get_secret_value`.
    """
    return boto3.client("secretsmanager", region_name=region)


def get_secret(region: str, secret_name: Optional[str] = None) -> Optional[dict]:
    """
    Fetch the current version of a JSON secret.

    Args:
        region (str): AWS region holding the secret.
        secret_name (str, optional): secret id; defaults to `settings.DB_SECRET_NAME`.

    Returns:
        dict | None: the decoded secret, or None when it has no `SecretString`.

    Raises:
        botocore.exceptions.ClientError: secret missing or access denied.
        json.JSONDecodeError: the secret is not JSON.
    """
    client = get_client(region)
    response = client.get_secret_value(
        SecretId=secret_name or settings.DB_SECRET_NAME,
        VersionStage="AWSCURRENT",
    )
    secret_string = response.get("SecretString") if response else None
    if not secret_string:
        return None
    return json.loads(secret_string)
