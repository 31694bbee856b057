"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dumpcs_catalog.domain.services.parsing import DumpCsParser

SAMPLE_DUMP = """\
// Image 0: mscorlib.dll - 0
// Image 1: UnityEngine.CoreModule.dll - 10
// Image 2: Assembly-CSharp.dll - 20

// Namespace: 
public class <Module> // TypeDefIndex: 0
{
}

// Namespace: UnityEngine
public struct Vector3 // TypeDefIndex: 12
{
	// Fields
	public float x; // 0x10
	public float y; // 0x14

	// Methods

	// RVA: 0x1A2B3C Offset: 0x1A1B3C VA: 0x1A2B3C
	public void .ctor(float x, float y, float z) { }

	// RVA: 0x1A2C00 Offset: 0x1A1C00 VA: 0x1A2C00
	public static float Dot(Vector3 lhs, Vector3 rhs) { }
}

// Namespace: Game
public enum Color // TypeDefIndex: 21
{
	// Fields
	public int value__; // 0x0
	public const Color Red = 0;
	public const Color Green = 1;
}

// Namespace: Game
public class PlayerController : MonoBehaviour // TypeDefIndex: 25
{
	// Fields
	private int health; // 0x18
	public Dictionary<string, int> scores; // 0x20

	// Properties
	public int Health { get; set; }

	// Events
	public event Action<int> OnDamaged;

	// Methods

	// RVA: 0x2000 Offset: 0x1000 VA: 0x7F002000
	public int get_Health() { }

	// RVA: 0x2010 Offset: 0x1010 VA: 0x7F002010
	public void add_OnDamaged(Action<int> value) { }

	// RVA: 0x2020 Offset: 0x1020 VA: 0x7F002020
	public PlayerController() { }

	public void Orphan() { }

	// RVA: 0x2030 Offset: 0x2030 VA: 0x7F002030
	private void Update() { }
	/* GenericInstMethod :
	|
	|-RVA: 0x3000 Offset: 0x3000 VA: 0x3000
	|-PlayerController.Update<int>
	*/

	// RVA: 0x2040 VA: 0x7F002040
	public bool TryGet(Dictionary<int, string> map, out int value) { }
}
"""


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_dump_text() -> str:
    """Small dump covering images, namespaces, enums and every section."""
    return SAMPLE_DUMP


@pytest.fixture
def sample_dump(tmp_path: Path, sample_dump_text: str) -> Path:
    """Write the sample dump to a temporary dump.cs file."""
    path = tmp_path / "dump.cs"
    path.write_text(sample_dump_text, encoding="utf-8")
    return path


@pytest.fixture
def write_dump(tmp_path: Path):
    """Factory writing arbitrary dump text to a named file in tmp_path."""

    def _write(text: str, name: str = "dump.cs") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def parser() -> DumpCsParser:
    """Parser with the default progress cadence."""
    return DumpCsParser(progress_interval=200)
