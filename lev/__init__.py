"""lev: inspect and edit the environment variables of a deployed AWS Lambda function."""

__version__ = "0.2.0"
