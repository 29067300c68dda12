import plistlib

import pytest

from xcode_bump.config import reset_config

PBXPROJ_TEMPLATE = """// !$*UTF8*$!
{{
	archiveVersion = 1;
	classes = {{
	}};
	objectVersion = 56;
	objects = {{

/* Begin PBXProject section */
		F41FD01C2E2A466F00909132 /* Project object */ = {{
			isa = PBXProject;
			buildConfigurationList = F41FD01F2E2A466F00909132 /* Build configuration list for PBXProject "App" */;
			compatibilityVersion = "Xcode 14.0";
			knownRegions = (
				en,
				Base,
			);
		}};
/* End PBXProject section */

/* Begin XCBuildConfiguration section */
{configurations}/* End XCBuildConfiguration section */
	}};
	rootObject = F41FD01C2E2A466F00909132 /* Project object */;
}}
"""

CONFIGURATION_TEMPLATE = """		{identifier} /* {name} */ = {{
			isa = XCBuildConfiguration;
			buildSettings = {{
				"CODE_SIGN_IDENTITY[sdk=iphoneos*]" = "iPhone Developer";
				OTHER_LDFLAGS = (
					"-ObjC",
					"$(inherited)",
				);
				PRODUCT_NAME = "$(TARGET_NAME)";
{settings}			}};
			name = {name};
		}};
"""


def make_pbxproj(configurations):
    """Builds project.pbxproj text from (name, info_plist_or_None) pairs."""
    blocks = []
    for number, (name, info_plist) in enumerate(configurations):
        settings = ""
        if info_plist is not None:
            settings = f'\t\t\t\tINFOPLIST_FILE = "{info_plist}";\n'
        blocks.append(
            CONFIGURATION_TEMPLATE.format(identifier=f"F41FD0{number:02d}2E2A467000909132", name=name, settings=settings)
        )
    return PBXPROJ_TEMPLATE.format(configurations="".join(blocks))


@pytest.fixture(autouse=True)
def fresh_config():
    """Reloads configuration for every test so cwd changes take effect."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def write_plist_file():
    def _write(path, data, fmt=plistlib.FMT_XML):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(plistlib.dumps(data, fmt=fmt))
        return path

    return _write


@pytest.fixture
def xcode_project(tmp_path):
    """Creates App.xcodeproj in tmp_path declaring the given configurations."""

    def _create(configurations, name="App"):
        project = tmp_path / f"{name}.xcodeproj"
        project.mkdir()
        (project / "project.pbxproj").write_text(make_pbxproj(configurations), encoding="utf-8")
        return project

    return _create
