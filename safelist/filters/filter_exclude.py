# --- EXCLUDE RULES: regex, first match drops the class ---------------------
EXCLUDE_PATTERNS = (
    # WordPress core / plugins
    r'^wp-',            # wp-block-group, wp-image-12
    r'^wpcf7',          # wpcf7-form, wpcf7-submit
    r'^acf-',           # acf-block-preview

    # Block editor
    r'^block-',         # block-editor-block-list
    r'^is-',            # is-style-outline, is-layout-flex
    r'^has-',           # has-text-color (drop if the theme maps them in Tailwind)

    # Alignment helpers
    r'^alignwide$',
    r'^alignfull$',
    r'^alignleft$',
    r'^alignright$',
    r'^aligncenter$',
)
