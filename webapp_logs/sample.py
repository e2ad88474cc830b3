"""
Azure App Service sample for managing web app logs
 - Create a web app under a new App Service plan
 - Deploy the coffeeshop package through web deploy
 - Stream the publishing profile for up to 120 seconds
 - Delete the resource group
"""
import time
from contextlib import contextmanager
from . import utilities
from .app_deployment import AppDeploymentManager
from .azure_client import AzureClient
from .log_streamer import LogStreamer
from .settings import SampleSettings


@contextmanager
def provisioned_resource_group(azure_client: AzureClient, name: str, location: str):
    """
    Create a resource group and delete it on every exit path.

    If creation itself fails nothing is deleted and the creation error
    propagates. Failures while deleting are logged, never raised.
    """
    resource_group = None
    try:
        resource_group = azure_client.create_resource_group(name, location)
        utilities.log(f"Created resource group {name}")
        yield resource_group
    finally:
        release_resource_group(azure_client, name, resource_group)


def release_resource_group(azure_client: AzureClient, name: str, resource_group) -> bool:
    """Delete an acquired resource group. Returns True if the delete completed."""
    utilities.log(f"Deleting Resource Group: {name}")
    if resource_group is None:
        utilities.log("Did not create any resources in Azure. No clean up is necessary")
        return False

    try:
        azure_client.delete_resource_group(name)
        utilities.log(f"Deleted Resource Group: {name}")
        return True
    except Exception as e:
        utilities.log_error(e)
        return False


def run_sample(azure_client: AzureClient, settings: SampleSettings = None, clock=time.time):
    """
    Run the sample end to end and return the background deployment thread.

    The thread is started once the first profile line has been read, even
    when the stream is empty. It is detached: the resource group is deleted
    once streaming stops, whether or not the deployment has finished.
    """
    settings = settings or SampleSettings()
    app_name = utilities.create_random_name(settings.app_name_prefix)
    rg_name = utilities.create_random_name(settings.resource_group_prefix)

    deployer = AppDeploymentManager(azure_client, settings)
    streamer = LogStreamer(timeout=settings.stream_timeout, clock=clock)
    background = {}

    with provisioned_resource_group(azure_client, rg_name, settings.region):
        web_app = deployer.create_web_app(rg_name, app_name)

        profile = azure_client.get_publishing_profile_stream(rg_name, app_name)
        utilities.log(f"Streaming logs from web app {app_name}...")

        def start_deployment():
            background['thread'] = deployer.start_background_deployment(rg_name, app_name, web_app)

        streamer.stream_profile(profile, on_start=start_deployment)

    return background.get('thread')


def main(settings: SampleSettings = None):
    """Authenticate from the environment and run the sample, logging any failure"""
    try:
        azure_client = AzureClient()

        utilities.log(f"Selected subscription: {azure_client.subscription_resource_id}")

        return run_sample(azure_client, settings)
    except Exception as e:
        utilities.log_error(e)
