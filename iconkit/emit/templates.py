"""Static sources written verbatim into every build.

The component templates do not depend on which icons exist. Both implement the
same selection rule and merge order as ``iconkit.render.component``.
"""

from __future__ import annotations

COMPONENT_FILENAME = "Icon.svelte"
BARREL_FILENAME = "index.js"
TYPES_FILENAME = "index.d.ts"
ICONS_DIRNAME = "icons"

# Shared by both components: variant > micro > mini > solid > outline,
# missing variant falls back to outline, missing outline renders empty.
_SELECT_SCRIPT = """\
    let selected = $derived(
        variant || (micro ? 'micro' : mini ? 'mini' : solid ? 'solid' : 'outline')
    );

    let icon = $derived(src?.[selected] ?? src?.outline ?? null);
"""

STRUCTURED_COMPONENT = (
    """\
<script>
    let {
        src,
        size = 24,
        mini = false,
        micro = false,
        solid = false,
        variant = null,
        class: className = undefined,
        style = undefined,
        ...rest
    } = $props();

"""
    + _SELECT_SCRIPT
    + """
    // Later entries win: root attributes, size, aria-hidden, rest, class/style.
    function mergeAttributes(root, size, rest, className, style) {
        const merged = {};
        for (const [key, value] of Object.entries(root ?? {})) merged[key] = value;
        merged.width = size;
        merged.height = size;
        merged['aria-hidden'] = 'true';
        for (const [key, value] of Object.entries(rest)) merged[key] = value;
        if (className) merged.class = className;
        if (style) merged.style = style;
        return merged;
    }

    let attributes = $derived(mergeAttributes(icon?.a, size, rest, className, style));
</script>

<svg xmlns="http://www.w3.org/2000/svg" {...attributes}>
    {#each icon?.path ?? [] as attrs}
        <path {...attrs} />
    {/each}
</svg>
"""
)

RAW_COMPONENT = (
    """\
<script>
    let {
        src,
        size = 24,
        mini = false,
        micro = false,
        solid = false,
        variant = null,
        class: className = undefined,
        style = undefined
    } = $props();

"""
    + _SELECT_SCRIPT
    + """
    function setAttribute(tag, name, value) {
        const pattern = new RegExp(`\\\\s${name}="[^"]*"`);
        if (pattern.test(tag)) return tag.replace(pattern, () => ` ${name}="${value}"`);
        return tag.replace('<svg', () => `<svg ${name}="${value}"`);
    }

    function appendAttribute(tag, name, value, separator) {
        const pattern = new RegExp(`\\\\s${name}="([^"]*)"`);
        const match = tag.match(pattern);
        if (match) return tag.replace(pattern, () => ` ${name}="${match[1]}${separator}${value}"`);
        return tag.replace('<svg', () => `<svg ${name}="${value}"`);
    }

    function prepare(markup, size, className, style) {
        if (!markup) return '';
        const open = markup.match(/<svg\\b[^>]*>/);
        if (!open) return markup;
        let tag = open[0];
        tag = setAttribute(tag, 'width', size);
        tag = setAttribute(tag, 'height', size);
        if (className) tag = appendAttribute(tag, 'class', className, ' ');
        if (style) tag = appendAttribute(tag, 'style', style, ';');
        return markup.slice(0, open.index) + tag + markup.slice(open.index + open[0].length);
    }

    let markup = $derived(prepare(icon, size, className, style));
</script>

{@html markup}
"""
)

COMPONENTS = {
    "structured": STRUCTURED_COMPONENT,
    "raw": RAW_COMPONENT,
}

BARREL_HEADER = "export { default as Icon } from './Icon.svelte';\n"
BARREL_LINE = "export {{ {name} }} from './icons/{name}.js';\n"

VARIANT_DATA_TYPES = {
    "structured": """\
export interface IconVariantData {
    a: Record<string, string>;
    path: Record<string, string>[];
}
""",
    "raw": "export type IconVariantData = string;\n",
}

TYPES_BODY = """\
export interface IconVariants {
    outline?: IconVariantData;
    solid?: IconVariantData;
    mini?: IconVariantData;
    micro?: IconVariantData;
}
export interface IconProps {
    src: IconVariants;
    size?: string | number;
    mini?: boolean;
    micro?: boolean;
    solid?: boolean;
    variant?: 'outline' | 'solid' | 'mini' | 'micro';
    class?: ClassValue;
    style?: string;
    [attribute: string]: unknown;
}
export type IconSource = IconVariants;
export declare const Icon: Component<IconProps>;
// Icon exports
"""

TYPES_IMPORTS = """\
import type { Component } from 'svelte';
import type { ClassValue } from 'svelte/elements';

"""

TYPES_LINE = "export declare const {name}: IconVariants;\n"

ICON_MODULE = "export const {name} = {data};\n"
