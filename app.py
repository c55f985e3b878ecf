#!/usr/bin/env python3
import os

from aws_cdk import App, Environment

from infra.static_site import StaticSiteStack

app = App()


StaticSiteStack(
    app, "CoffeeMenuStack", "coffeemenu",
    env=Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=os.getenv("CDK_DEFAULT_REGION"),
    ),
)


app.synth()
