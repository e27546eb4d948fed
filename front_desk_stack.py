from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class FrontDeskStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        cors_allow_origin = self.node.try_get_context("cors_allow_origin") or "*"

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            hotel_timezone=self.node.try_get_context("hotel_timezone") or "Asia/Kolkata",
            hotel_currency=self.node.try_get_context("hotel_currency") or "INR",
            cors_allow_origin=cors_allow_origin,
        )

        api = Api(
            self,
            "Api",
            functions=fns.functions,
            allow_origins=None if cors_allow_origin == "*" else [cors_allow_origin],
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
