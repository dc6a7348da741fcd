import sys
import os


def get_resource_path(relative_path):
    """
    Resolve the absolute path of a bundled resource file.
    Works both from the source tree and from a PyInstaller executable.

    Args:
        relative_path (str): path below the resources folder
            (e.g. "config/keypad_config.yml")

    Returns:
        str: absolute path of the resource
    """
    if getattr(sys, 'frozen', False):
        # Frozen build: resources/ sits next to the executable
        base_path = os.path.dirname(sys.executable)
        resource_path = os.path.join(base_path, "resources", relative_path)
    else:
        # Source tree: project_root/scrambled_keypad/paths.py
        # Resources: project_root/resources/
        current_dir = os.path.dirname(os.path.abspath(__file__))
        project_root = os.path.dirname(current_dir)
        resource_path = os.path.join(project_root, "resources", relative_path)

    return os.path.abspath(resource_path)
