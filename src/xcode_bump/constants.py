"""Keys and names shared across the version bump tool."""

INFO_PLIST_SETTING = "INFOPLIST_FILE"
BUNDLE_SHORT_VERSION_KEY = "CFBundleShortVersionString"
BUNDLE_VERSION_KEY = "CFBundleVersion"

PROJECT_SUFFIX = ".xcodeproj"
PBXPROJ_FILENAME = "project.pbxproj"

CONFIG_FILENAME = ".xcode-bump.yaml"
