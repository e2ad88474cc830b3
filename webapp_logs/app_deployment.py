"""
Web App Deployment Module
Creates the sample web app, deploys the coffeeshop package and warms it up
"""
import threading
import time
from azure.core.exceptions import HttpResponseError
from azure.mgmt.web.models import SiteConfig
from . import utilities
from .azure_client import AzureClient
from .settings import SampleSettings


class AppDeploymentManager:
    """Manages creation, deployment and warm-up of the sample web app"""

    def __init__(self, azure_client: AzureClient, settings: SampleSettings = None):
        self.azure_client = azure_client
        self.settings = settings or SampleSettings()

    def create_web_app(self, resource_group: str, app_name: str):
        """Create the web app under a new App Service plan"""
        utilities.log(f"Creating web app {app_name} in resource group {resource_group}...")

        site_config = SiteConfig(net_framework_version='v4.6')

        try:
            web_app = self.azure_client.create_web_app(
                resource_group,
                app_name,
                self.settings.region,
                site_config
            )
        except HttpResponseError as e:
            error_msg = e.message if hasattr(e, 'message') else str(e)
            utilities.log(f"HTTP Error creating web app: {error_msg}")
            raise

        utilities.log(f"Created web app {web_app.name}")
        utilities.print_resource(web_app)
        return web_app

    def deploy_and_warm_up(self, resource_group: str, app_name: str, web_app=None):
        """Deploy the package after the fixed delay, then probe the endpoint"""
        time.sleep(self.settings.deploy_delay)
        utilities.log(f"Deploying coffeeshop.war to {app_name} through web deploy...")

        try:
            self.azure_client.deploy_package(
                resource_group,
                app_name,
                self.settings.package_uri,
                app_offline=False
            )
        except HttpResponseError as e:
            error_msg = e.message if hasattr(e, 'message') else str(e)
            utilities.log(f"HTTP Error deploying to web app: {error_msg}")
            raise

        utilities.log(f"Deployments to web app {app_name} completed")
        if web_app is not None:
            utilities.print_resource(web_app)

        return self.probe_endpoint(self.settings.app_host(app_name))

    def probe_endpoint(self, app_host: str) -> list:
        """GET the sample endpoint once after each probe delay and log the bodies"""
        endpoint = app_host + self.settings.endpoint_path
        utilities.log(f"Warming up {endpoint}...")

        responses = []
        for delay in self.settings.probe_delays:
            time.sleep(delay)
            utilities.log(f"CURLing {endpoint}...")
            body = utilities.check_address("http://" + endpoint)
            utilities.log(body)
            responses.append(body)

        return responses

    def start_background_deployment(self, resource_group: str, app_name: str,
                                    web_app=None) -> threading.Thread:
        """Run deploy_and_warm_up in a detached daemon thread"""
        def deploy_in_background():
            try:
                self.deploy_and_warm_up(resource_group, app_name, web_app)
            except Exception as e:
                utilities.log_error(e)

        deployment_thread = threading.Thread(target=deploy_in_background)
        deployment_thread.daemon = True
        deployment_thread.start()
        return deployment_thread
