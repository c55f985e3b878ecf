from pathlib import Path

from aws_cdk import CfnOutput, RemovalPolicy, Stack
from aws_cdk.aws_cloudfront import BehaviorOptions, Distribution, ViewerProtocolPolicy
from aws_cdk.aws_cloudfront_origins import S3BucketOrigin
from aws_cdk.aws_s3 import BlockPublicAccess, Bucket
from aws_cdk.aws_s3_deployment import BucketDeployment, Source
from constructs import Construct

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class StaticSiteStack(Stack):
    """
    private bucket holding the menu page, served through CloudFront over https
    """

    def __init__(self, scope: Construct, construct_id: str, context: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        context: dict = dict(self.node.try_get_context(context))
        self.prefix: str = context['project_name']

        self.source_bucket = self.create_bucket(context)
        self.cfront_dist = self.create_distribution()

        site_dir = self.get_site_dir(context)
        if (site_dir / "index.html").exists():
            self.deployment = self.create_deployment(site_dir)

        self.bucket_name = CfnOutput(self, "BucketName", value=self.source_bucket.bucket_name)
        self.distribution_domain_name = CfnOutput(
            self, "DistributionDomainName", value=self.cfront_dist.distribution_domain_name
        )
        self.distribution_id = CfnOutput(self, "DistributionId", value=self.cfront_dist.distribution_id)

    def create_bucket(self, context):
        return Bucket(
            self,
            f"{self.prefix}Bucket",
            bucket_name=context["bucket_name"],
            block_public_access=BlockPublicAccess.BLOCK_ALL,
            public_read_access=False,
            removal_policy=RemovalPolicy.RETAIN,
        )

    def create_distribution(self):
        return Distribution(
            self, f"{self.prefix}Cdn",
            default_root_object="index.html",
            default_behavior=self.get_default_behavior(self.source_bucket),
        )

    @staticmethod
    def get_default_behavior(source_bucket):
        return BehaviorOptions(
            origin=S3BucketOrigin.with_origin_access_control(source_bucket),
            viewer_protocol_policy=ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        )

    @staticmethod
    def get_site_dir(context) -> Path:
        site_dir = Path(context.get("site_path", "dist"))
        if not site_dir.is_absolute():
            site_dir = PROJECT_ROOT / site_dir
        return site_dir

    def create_deployment(self, site_dir: Path):
        return BucketDeployment(
            self,
            f"{self.prefix}Deployment",
            sources=[Source.asset(str(site_dir))],
            destination_bucket=self.source_bucket,
            distribution=self.cfront_dist,
            distribution_paths=["/*"],
        )
