from .base import ProvisionStep, SetupContext
from .step_10_layer_packages import LayerPackagesStep
from .step_20_clone_dotfiles import CloneDotfilesStep
from .step_30_stow_dotfiles import StowDotfilesStep
from .step_40_install_mise import InstallMiseStep
from .step_50_install_starship import InstallStarshipStep
from .step_60_install_rclone import InstallRcloneStep
from .step_70_install_lazygit import InstallLazygitStep
from .step_80_install_distrobox import InstallDistroboxStep
from .step_85_create_containers import CreateContainersStep
from .step_90_install_flatpaks import InstallFlatpaksStep
from .step_95_change_shell import ChangeShellStep

__all__ = [
    "ProvisionStep",
    "SetupContext",
    "LayerPackagesStep",
    "CloneDotfilesStep",
    "StowDotfilesStep",
    "InstallMiseStep",
    "InstallStarshipStep",
    "InstallRcloneStep",
    "InstallLazygitStep",
    "InstallDistroboxStep",
    "CreateContainersStep",
    "InstallFlatpaksStep",
    "ChangeShellStep",
]
