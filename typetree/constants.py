"""
Constants used across the typetree modules.

Consolidates asset format version thresholds, wire limits and the default
common-string pool shared by every modern TypeTree.
"""

# Asset format version from which the TypeTree carries a revision string,
# an attributes word and (legacy format) a trailing padding word
REVISION_MIN_ASSET_VERSION = 7

# Asset format version from which the flattened, string-table based layout is used
MODERN_MIN_ASSET_VERSION = 14

# Maximum bytes read for the revision string (e.g. "5.0.1f1")
REVISION_MAX_LENGTH = 255

# Maximum bytes read for inline type/field names in legacy Type records
STRING_MAX_LENGTH = 256

# Size of a modern Type record: i16 + u8 + u8 + 5 * i32
MODERN_TYPE_RECORD_SIZE = 24

# Size of a serialized GUID
GUID_SIZE = 16

# Offsets with this bit set point into the common-string pool
COMMON_STRING_FLAG = 0x80000000
COMMON_STRING_MASK = 0x7FFFFFFF

# Common-string pool, in buffer order. Offsets are the byte positions of each
# entry in the null-separated buffer, so order must never change.
COMMON_STRINGS = (
    "AABB",
    "AnimationClip",
    "AnimationCurve",
    "AnimationState",
    "Array",
    "Base",
    "BitField",
    "bitset",
    "bool",
    "char",
    "ColorRGBA",
    "Component",
    "data",
    "deque",
    "double",
    "dynamic_array",
    "FastPropertyName",
    "first",
    "float",
    "Font",
    "GameObject",
    "Generic Mono",
    "GradientNEW",
    "GUID",
    "GUIStyle",
    "int",
    "list",
    "long long",
    "map",
    "Matrix4x4f",
    "MdFour",
    "MonoBehaviour",
    "MonoScript",
    "m_ByteSize",
    "m_Curve",
    "m_EditorClassIdentifier",
    "m_EditorHideFlags",
    "m_Enabled",
    "m_ExtensionPtr",
    "m_GameObject",
    "m_Index",
    "m_IsArray",
    "m_IsStatic",
    "m_MetaFlag",
    "m_Name",
    "m_ObjectHideFlags",
    "m_PrefabInternal",
    "m_PrefabParentObject",
    "m_Script",
    "m_StaticEditorFlags",
    "m_Type",
    "m_Version",
    "Object",
    "pair",
    "PPtr<Component>",
    "PPtr<GameObject>",
    "PPtr<Material>",
    "PPtr<MonoBehaviour>",
    "PPtr<MonoScript>",
    "PPtr<Object>",
    "PPtr<Prefab>",
    "PPtr<Sprite>",
    "PPtr<TextAsset>",
    "PPtr<Texture>",
    "PPtr<Texture2D>",
    "PPtr<Transform>",
    "Prefab",
    "Quaternionf",
    "Rectf",
    "RectInt",
    "RectOffset",
    "second",
    "set",
    "short",
    "size",
    "SInt16",
    "SInt32",
    "SInt64",
    "SInt8",
    "staticvector",
    "string",
    "TextAsset",
    "TextMesh",
    "Texture",
    "Texture2D",
    "Transform",
    "TypelessData",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt8",
    "unsigned int",
    "unsigned long long",
    "unsigned short",
    "vector",
    "Vector2f",
    "Vector3f",
    "Vector4f",
    "m_ScriptingClassIdentifier",
    "Gradient",
    "Type*",
)
