#!/usr/bin/env python3
"""
PlanetShine Quick Start - Installation Verification
===================================================

Run: python quickstart.py

This script verifies your PlanetShine installation by:
1. Checking all required Python packages are installed
2. Importing the PlanetShine modules
3. Loading the default configuration
4. Computing one frame of albedo lighting
"""

import sys
from pathlib import Path

# Project root setup
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))


def print_header(title):
    """Print a formatted section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_check(name, passed, details=None):
    """Print a check result."""
    status = "[OK]" if passed else "[FAIL]"
    print(f"  {status} {name}")
    if details:
        print(f"       {details}")


def check_imports():
    """Check all required Python packages are installed."""
    print_header("Checking Python Dependencies")

    packages = [
        ("numpy", "numpy"),
        ("numpy-quaternion", "quaternion"),
        ("PyYAML", "yaml"),
        ("matplotlib", "matplotlib"),
        ("tqdm", "tqdm"),
    ]

    all_ok = True
    for name, import_name in packages:
        try:
            module = __import__(import_name)
            version = getattr(module, "__version__", "unknown")
            print_check(name, True, f"version {version}")
        except ImportError as e:
            print_check(name, False, str(e))
            all_ok = False

    return all_ok


def check_planetshine_modules():
    """Check PlanetShine modules can be imported."""
    print_header("Checking PlanetShine Modules")

    modules = [
        ("Config Manager", "planetshine.config", "PlanetShineConfigManager"),
        ("Albedo Lighting", "planetshine.computation", "compute_albedo_lighting"),
        ("Light Pool", "planetshine.scene", "LightPool"),
        ("Lighting Session", "planetshine.session", "LightingSession"),
        ("Data Writer", "planetshine.io", "save_lighting_data"),
        ("Lighting Plotter", "planetshine.visualization", "create_lighting_profile_plot"),
    ]

    all_ok = True
    for name, module_path, attr_name in modules:
        try:
            module = __import__(module_path, fromlist=[attr_name])
            getattr(module, attr_name)
            print_check(name, True)
        except Exception as e:
            print_check(name, False, str(e))
            all_ok = False

    return all_ok


def run_sample_frame():
    """Load the default configuration and compute one frame."""
    print_header("Computing Sample Frame")

    try:
        from planetshine.config import PlanetShineConfigManager
        from planetshine.scene import AmbientLight, build_frame
        from planetshine.session import LightingSession

        config = PlanetShineConfigManager(PROJECT_ROOT).load_config()
        print_check("Configuration loaded", True,
                    f"{config.albedo_lights_quantity} lights, {len(config.celestial_bodies)} bodies")

        session = LightingSession(config, ambient_light=AmbientLight())
        session.start()
        snapshot = session.update(build_frame(600_000.0, 700_000.0, 30.0, body_name="Kerbin"))
        session.close()

        print_check("Frame computed", snapshot is not None,
                    f"light intensity {snapshot.light_intensity:.4f}" if snapshot else None)
        return snapshot is not None
    except Exception as e:
        print_check("Sample frame", False, str(e))
        return False


def print_summary(results):
    """Print final summary and next steps."""
    print_header("Summary")

    if all(results.values()):
        print("  All checks passed! Your PlanetShine installation is ready.")
    else:
        print("  Some checks failed. Please review the errors above.")
        print()
        print("  Try reinstalling:")
        print("    pip install -e .[test]")
        return

    print()
    print("-" * 60)
    print("  Next Steps:")
    print("-" * 60)
    print()
    print("  1. Run the examples:")
    print("     python examples/01_single_frame.py")
    print("     python examples/02_altitude_sweep.py")
    print()
    print("  2. Tune data/config/planetshine_config.yaml")
    print()


def main():
    """Run all verification checks."""
    print()
    print("=" * 60)
    print("  PlanetShine Quick Start - Installation Verification")
    print("=" * 60)

    results = {}
    results["imports"] = check_imports()
    results["planetshine_modules"] = check_planetshine_modules()
    results["sample_frame"] = run_sample_frame()

    print_summary(results)


if __name__ == "__main__":
    main()
