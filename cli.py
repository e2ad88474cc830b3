#!/usr/bin/env python3
"""
Manage Web App Logs CLI - runs the Azure App Service log streaming sample
"""
import click
from webapp_logs import utilities
from webapp_logs.sample import main
from webapp_logs.settings import COFFEESHOP_PACKAGE_URI, SampleSettings


@click.group()
def cli():
    """Manage Web App Logs - Azure App Service sample CLI"""
    pass


@cli.command('run')
@click.option('--region', '-l', default='eastus', help='Azure region for the resource group and web app')
@click.option('--stream-timeout', '-t', default=120, type=float, help='Seconds to stream the publishing profile')
@click.option('--package-uri', default=COFFEESHOP_PACKAGE_URI, help='Package deployed through web deploy')
@click.option('--playback', is_flag=True, help='Skip real HTTP probes and log the playback sentinel')
def run(region, stream_timeout, package_uri, playback):
    """Create a web app, deploy to it, stream its profile, then clean up"""
    utilities.logger_method = click.echo
    utilities.is_running_mocked = playback

    settings = SampleSettings(
        region=region,
        stream_timeout=stream_timeout,
        package_uri=package_uri
    )
    main(settings)


@cli.command('probe')
@click.argument('url')
@click.option('--playback', is_flag=True, help='Return the playback sentinel without any network call')
def probe(url, playback):
    """GET a URL once and print the response body"""
    utilities.logger_method = click.echo
    utilities.is_running_mocked = playback

    utilities.log(f"CURLing {url}...")
    utilities.log(utilities.check_address(url))


if __name__ == '__main__':
    cli()
