"""
Azure client for the web app sample: resource groups, web apps, MSDeploy and
publishing profiles
"""
from typing import Iterator
from azure.identity import ClientSecretCredential
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.web import WebSiteManagementClient
from azure.mgmt.web.models import CsmPublishingProfileOptions, MSDeploy, Site, SiteConfig
from .settings import Credentials


class AzureClient:
    """Azure client scoped to one subscription"""

    def __init__(self, credentials: Credentials = None):
        self.credentials = credentials or Credentials.from_env()
        self.subscription_id = self.credentials.subscription_id

        # Missing values are not checked here, they surface from the credential
        # or from the first management call
        self.credential = ClientSecretCredential(
            tenant_id=self.credentials.tenant_id,
            client_id=self.credentials.client_id,
            client_secret=self.credentials.client_secret
        )

        self.resource_client = ResourceManagementClient(
            self.credential,
            self.subscription_id
        )
        self.web_client = WebSiteManagementClient(
            self.credential,
            self.subscription_id
        )

    @property
    def subscription_resource_id(self) -> str:
        return f"/subscriptions/{self.subscription_id}"

    def create_resource_group(self, name: str, location: str):
        """Create a resource group and return it once provisioning completes"""
        try:
            return self.resource_client.resource_groups.create_or_update(
                resource_group_name=name,
                parameters={"location": location}
            )
        except Exception as e:
            raise Exception(f"Failed to create resource group: {str(e)}")

    def delete_resource_group(self, name: str):
        """Delete a resource group and wait for the operation to finish"""
        delete_operation = self.resource_client.resource_groups.begin_delete(name)
        return delete_operation.result()

    def create_web_app(self, resource_group: str, name: str, location: str,
                       site_config: SiteConfig = None):
        """Create a web app with an implicit App Service plan"""
        site = Site(location=location, site_config=site_config)

        # Long-running operation, block until the site exists
        app_poller = self.web_client.web_apps.begin_create_or_update(
            resource_group,
            name,
            site
        )
        return app_poller.result()

    def deploy_package(self, resource_group: str, app_name: str, package_uri: str,
                       app_offline: bool = False):
        """Push a package into a web app through the MSDeploy site extension"""
        ms_deploy = MSDeploy(package_uri=package_uri, app_offline=app_offline)
        deploy_poller = self.web_client.web_apps.begin_create_ms_deploy_operation(
            resource_group,
            app_name,
            ms_deploy
        )
        return deploy_poller.result()

    def get_publishing_profile_stream(self, resource_group: str, app_name: str,
                                      profile_format: str = "Ftp") -> Iterator[bytes]:
        """Open the publishing profile (with secrets) of a web app as a byte stream"""
        return self.web_client.web_apps.list_publishing_profile_xml_with_secrets(
            resource_group,
            app_name,
            CsmPublishingProfileOptions(format=profile_format)
        )
