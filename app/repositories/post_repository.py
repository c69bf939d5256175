from typing import Any

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from app.repositories.decorators import handle_store_errors
from app.settings import Settings

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"
RESOURCE_IN_USE = "ResourceInUseException"


class PostRepository:
    SELECT_COUNT = "COUNT"

    def __init__(self):
        self._logger = Logger(utc=True)
        settings = Settings()
        self._dynamodb = boto3.Session().resource(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.database_url,
        )
        self._table = self._dynamodb.Table(settings.posts_table_name)

    def create_table(self):
        try:
            self._dynamodb.create_table(
                TableName=self._table.name,
                AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
                KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
                BillingMode="PAY_PER_REQUEST",
            )
        except ClientError as exc:
            if exc.response["Error"]["Code"] != RESOURCE_IN_USE:
                raise
            self._logger.info(f"Table already exists: {self._table.name}")
            return
        self._table.wait_until_exists()
        self._logger.info(f"Table created: {self._table.name}")

    @handle_store_errors
    def create_post(self, data: dict[str, Any]):
        self._table.put_item(Item=data)

    @handle_store_errors
    def create_posts(self, items: list[dict[str, Any]]):
        with self._table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)

    @handle_store_errors
    def list_posts(self) -> list[dict[str, Any]]:
        response = self._table.scan()
        items = response["Items"]
        while "LastEvaluatedKey" in response:
            response = self._table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
            items.extend(response["Items"])
        return items

    @handle_store_errors
    def count_posts(self) -> int:
        response = self._table.scan(Select=PostRepository.SELECT_COUNT)
        count = response["Count"]
        while "LastEvaluatedKey" in response:
            response = self._table.scan(
                Select=PostRepository.SELECT_COUNT,
                ExclusiveStartKey=response["LastEvaluatedKey"],
            )
            count += response["Count"]
        return count

    @handle_store_errors
    def get_post_by_id(self, post_id: str) -> dict[str, Any] | None:
        response = self._table.get_item(Key={"id": post_id}, ConsistentRead=True)
        return response.get("Item")

    @handle_store_errors
    def update_post(self, post_id: str, data: dict[str, Any]) -> bool:
        attribute_names = {}
        attribute_values = {}
        update_expression = []
        for k, v in data.items():
            attribute_names[f"#{k}"] = k
            if not isinstance(v, dict):
                attribute_values[f":{k}"] = v
                update_expression.append(f"#{k}=:{k}")
                continue
            # embedded maps are updated key by key so omitted keys survive
            for sub_k, sub_v in v.items():
                attribute_names[f"#{sub_k}"] = sub_k
                attribute_values[f":{k}_{sub_k}"] = sub_v
                update_expression.append(f"#{k}.#{sub_k}=:{k}_{sub_k}")
        try:
            self._table.update_item(
                Key={"id": post_id},
                ConditionExpression=Attr("id").exists(),
                UpdateExpression="SET " + ",".join(update_expression),
                ExpressionAttributeNames=attribute_names,
                ExpressionAttributeValues=attribute_values,
            )
        except ClientError as exc:
            if exc.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                return False
            raise
        return True

    @handle_store_errors
    def delete_post(self, post_id: str) -> bool:
        try:
            self._table.delete_item(
                Key={"id": post_id}, ConditionExpression=Attr("id").exists()
            )
        except ClientError as exc:
            if exc.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                return False
            raise
        return True
