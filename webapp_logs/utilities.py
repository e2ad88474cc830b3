"""
Shared helpers for the sample: the logging indirection point, random resource
names, resource printing and plain HTTP helpers with playback support
"""
import os
import random
import shutil
from typing import Dict, Optional
import requests


PLAYBACK_SENTINEL = "[Running in PlaybackMode]"

# Swapped by the CLI (click.echo) and by tests (list collectors)
logger_method = print
pause_method = input

# When set, HTTP helpers skip the network and return PLAYBACK_SENTINEL
is_running_mocked = False


_NOTHING = object()


def log(message=_NOTHING):
    """Log a message or object through the configured logger method"""
    if message is _NOTHING:
        logger_method("")
    elif message is None:
        logger_method("(null)")
    else:
        logger_method(str(message))


def log_error(error: BaseException):
    """Log an exception with its type, so errors without a message stay visible"""
    message = str(error)
    error_type = type(error).__name__
    log(f"{error_type}: {message}" if message else error_type)


def read_line() -> str:
    return pause_method()


def create_random_name(name_prefix: str) -> str:
    """Generate a resource name from a prefix and a random number below 9999"""
    return f"{name_prefix}{random.randrange(9999)}"


def create_password() -> str:
    return "azure12345QWE!"


def print_resource(resource):
    """Log the ARM identity of a resource"""
    resource_id = resource.id
    # /subscriptions/{sub}/resourceGroups/{rg}/providers/{namespace}/{type}/{name}
    parts = resource_id.split('/')
    resource_group_name = parts[4] if len(parts) > 4 else ""
    namespace = parts[6] if len(parts) > 6 else ""

    log(
        f"Resource: {resource_id}"
        f"\n\tName: {parts[-1]}"
        f"\n\tResourceGroupName: {resource_group_name}"
        f"\n\tNamespace Name: {namespace}"
    )


def check_address(url: str, headers: Optional[Dict[str, str]] = None) -> str:
    """GET a URL and return the response body"""
    if not is_running_mocked:
        try:
            response = requests.get(url, headers=headers or {}, timeout=300)
            return response.text
        except requests.RequestException as e:
            log_error(e)

    return PLAYBACK_SENTINEL


def post_address(url: str, body: str, headers: Optional[Dict[str, str]] = None) -> str:
    """POST a body to a URL and return a status summary of the response"""
    if not is_running_mocked:
        try:
            response = requests.post(url, data=body, headers=headers or {}, timeout=100)
            return f"StatusCode: {response.status_code}, ReasonPhrase: '{response.reason}'"
        except requests.RequestException as e:
            log_error(e)

    return PLAYBACK_SENTINEL


def upload_file_to_web_app(profile, file_path: str, file_name: str = None):
    """Copy a local file into a writable publishing stream and close it.

    Returns the leaf file name that was uploaded.
    """
    if is_running_mocked:
        return

    if file_name is None:
        file_name = os.path.basename(file_path)
    # Directories in the target name are dropped, only the leaf is uploaded
    while '/' in file_name:
        file_name = file_name[file_name.index('/') + 1:]

    with profile as write_stream, open(file_path, 'rb') as read_stream:
        shutil.copyfileobj(read_stream, write_stream)

    return file_name


upload_file_to_function_app = upload_file_to_web_app
