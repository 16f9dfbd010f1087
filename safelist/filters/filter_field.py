# --- CLASS FIELDS: key substrings (case-insensitive) ------------------------
# A field whose name contains one of these holds a bare class list,
# so its whole value is added next to any class="..." found inside it.
CLASS_FIELD_PATTERNS = (
    'class',            # class, body_class
    'classes',          # extra_classes
    'className',        # block editor attribute
    'css_class',
    'css_classes',
    'custom_class',
    'additional_class',
    'wrapper_class',    # wrapper_class on flexible layouts
    'container_class',
    'section_class',
    'style',            # button_style: "bg-blue-500 text-white"
    'styles',
    'tailwind',         # tailwind_utilities
)
