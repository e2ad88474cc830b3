"""
Sample configuration: service principal credentials and the fixed run constants
"""
import os
from dataclasses import dataclass
from typing import Optional, Tuple
from dotenv import load_dotenv


COFFEESHOP_PACKAGE_URI = (
    "https://github.com/Azure/azure-libraries-for-java/raw/master/"
    "azure-samples/src/main/resources/coffeeshop.zip"
)


@dataclass
class Credentials:
    client_id: Optional[str]
    client_secret: Optional[str]
    tenant_id: Optional[str]
    subscription_id: Optional[str]

    @classmethod
    def from_env(cls) -> "Credentials":
        """Read the service principal from the environment (and a local .env file)"""
        load_dotenv()
        return cls(
            client_id=os.getenv('CLIENT_ID'),
            client_secret=os.getenv('CLIENT_SECRET'),
            tenant_id=os.getenv('TENANT_ID'),
            subscription_id=os.getenv('SUBSCRIPTION_ID')
        )


@dataclass
class SampleSettings:
    region: str = "eastus"
    host_suffix: str = ".azurewebsites.net"
    app_name_prefix: str = "webapp1-"
    resource_group_prefix: str = "rg1NEMV_"
    package_uri: str = COFFEESHOP_PACKAGE_URI
    endpoint_path: str = "/coffeeshop"
    deploy_delay: float = 10
    probe_delays: Tuple[float, ...] = (5, 15, 25, 35)
    stream_timeout: float = 120

    def app_host(self, app_name: str) -> str:
        return app_name + self.host_suffix
