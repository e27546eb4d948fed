#!/usr/bin/env python3

import aws_cdk as cdk

from front_desk_stack import FrontDeskStack

app = cdk.App()
FrontDeskStack(
    app,
    "FrontDeskStack",
)

app.synth()
