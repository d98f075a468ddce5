from .installer import HookInstallError, hook_script, hooks_dir, install_hook

__all__ = ["install_hook", "hooks_dir", "hook_script", "HookInstallError"]
