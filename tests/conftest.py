"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from constgen.adapters.mock import StaticDataProvider
from constgen.core.models.settings import GeneratorSettings

from tests.unity_assets import UNITY_HEADER, write_unity_asset


@pytest.fixture
def project_data() -> dict:
    """Raw data for every domain, shaped like a small game project."""
    return {
        "scenes": [
            "Assets/Scenes/MainMenu.unity",
            "Assets/Scenes/Level1.unity",
        ],
        "tags": ["Untagged", "Player", "Enemy"],
        "layers": {0: "Default", 5: "UI", 8: "Ground"},
        "sorting_layers": [
            {"name": "Default", "id": 0},
            {"name": "Foreground", "id": 1791535523},
        ],
        "input_axes": ["Horizontal", "Vertical", "Fire1", "Horizontal"],
        "mixers": [
            {"asset_name": "Master", "exposed_parameter_names": ["MusicVolume", "SfxVolume"]},
        ],
        "animator_controllers": [
            {"asset_name": "Player", "parameter_names": ["Speed", "IsGrounded"]},
        ],
    }


@pytest.fixture
def provider(project_data: dict) -> StaticDataProvider:
    return StaticDataProvider(project_data)


@pytest.fixture
def settings() -> GeneratorSettings:
    return GeneratorSettings()


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """A minimal Unity project on disk covering every domain."""
    root = tmp_path / "Game"
    settings_dir = root / "ProjectSettings"
    assets = root / "Assets"

    write_unity_asset(settings_dir / "EditorBuildSettings.asset", """\
        EditorBuildSettings:
          m_ObjectHideFlags: 0
          serializedVersion: 2
          m_Scenes:
          - enabled: 1
            path: Assets/Scenes/MainMenu.unity
            guid: 2cda990e2423bbf4892e6590ba056729
          - enabled: 0
            path: Assets/Scenes/Level 1.unity
            guid: 9fc0d4010bbf28b4594072e72b8655ab
          m_configObjects: {}
        """, class_id=1045)

    layer_lines = ["Default", "TransparentFX", "Ignore Raycast", "", "Water", "UI", "", "", "Ground"]
    layer_lines += [""] * (32 - len(layer_lines))
    layers_yaml = "\n".join(f"  - {name}" if name else "  - " for name in layer_lines)
    (settings_dir / "TagManager.asset").write_text(
        UNITY_HEADER
        + "--- !u!78 &1\n"
        + "TagManager:\n"
        + "  serializedVersion: 2\n"
        + "  tags:\n"
        + "  - Enemy\n"
        + "  - Yes\n"
        + "  layers:\n"
        + layers_yaml + "\n"
        + "  m_SortingLayers:\n"
        + "  - name: Default\n"
        + "    uniqueID: 0\n"
        + "    locked: 0\n"
        + "  - name: Foreground\n"
        + "    uniqueID: 3871954323\n"
        + "    locked: 0\n",
        encoding="utf-8",
    )

    write_unity_asset(settings_dir / "InputManager.asset", """\
        InputManager:
          m_ObjectHideFlags: 0
          serializedVersion: 2
          m_Axes:
          - serializedVersion: 3
            m_Name: Horizontal
            descriptiveName: 
            positiveButton: right
            gravity: 3
          - serializedVersion: 3
            m_Name: Fire1
            positiveButton: left ctrl
          - serializedVersion: 3
            m_Name: Horizontal
            type: 2
        """, class_id=13)

    (assets / "Audio").mkdir(parents=True)
    (assets / "Audio" / "Master.mixer").write_text(
        UNITY_HEADER
        + "--- !u!244 &-5234567890123456789\n"
        + "AudioMixerGroupController:\n"
        + "  m_Name: Master\n"
        + "--- !u!241 &24100000\n"
        + "AudioMixerController:\n"
        + "  m_Name: Master\n"
        + "  m_ExposedParameters:\n"
        + "  - guid: 1a2b3c\n"
        + "    name: MusicVolume\n"
        + "  - guid: 4d5e6f\n"
        + "    name: SfxVolume\n",
        encoding="utf-8",
    )

    write_unity_asset(assets / "Animation" / "Player.controller", """\
        AnimatorController:
          m_ObjectHideFlags: 0
          m_Name: Player
          serializedVersion: 5
          m_AnimatorParameters:
          - m_Name: Speed
            m_Type: 1
            m_DefaultFloat: 0
          - m_Name: Jump
            m_Type: 9
        """, class_id=91, file_id=9100000)

    return root
