# main.py

"""Streamlit web UI for the text utilities.

Provides a simple interface to paste text and see its linkable elements,
and to format a single value through one of the mask presets.
"""

import streamlit as st
import logging
from textutils.logging_config import configure_logging
from textutils.logic.mask import MaskEngine
from textutils.service.config import settings
from textutils.service.pipeline import TextUtilsService, process_text

configure_logging(settings.log_level, json_format=settings.log_json)

logger = logging.getLogger(__name__)


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts input text from
    the user, runs the matcher over it, and lists the linkable elements
    with their positions and link targets.
    """
    st.set_page_config(layout="wide", page_title="Text Utilities", page_icon="🔗")

    st.title("Text Utilities")
    st.markdown(
        "Find URLs, hashtags, mentions, emails, phone numbers and markdown links, "
        "and format values with input masks."
    )
    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input Text")
        text_input = st.text_area(
            "Source Text",
            height=300,
            placeholder="Paste text here...",
        )
        mask_phones = st.checkbox("Format phone numbers", value=True)

    with col2:
        st.subheader("Linkable Elements")

        if st.button("Find Elements", type="primary"):
            if not text_input or not text_input.strip():
                st.warning("Please enter text to process.")
                logger.warning("Processing attempted with empty input")

            else:
                result = process_text(text_input, mask_phones=mask_phones)

                if "error" in result.metadata:
                    st.error(f"Processing failed: {result.metadata['error']}")
                else:
                    rows = [
                        {
                            "kind": m.kind,
                            "text": m.raw_text,
                            "value": m.value,
                            "start": m.start,
                            "end": m.end,
                            "url": m.url,
                        }
                        for m in result.matches
                    ]
                    st.dataframe(rows)
                    st.success(f"Found {len(result.matches)} elements.")

    st.markdown("---")
    st.subheader("Format a Value")

    preset = st.selectbox("Preset", MaskEngine.preset_names())
    raw_value = st.text_input("Raw value", placeholder="1234567890")

    if raw_value:
        utils = TextUtilsService.get_instance()
        formatted = utils.mask(raw_value, preset)
        if formatted:
            st.code(formatted)
        else:
            st.info(f"'{raw_value}' does not fit the {preset} mask.")

    with st.sidebar:
        st.header("About")
        st.markdown("""
        Recognized elements:

        - **URLs** (http, https, www. and bare domains)
        - **Hashtags** and **mentions**
        - **Email addresses**
        - **Phone numbers** (with country code and extension)
        - **Markdown links**

        Mask presets cover phone numbers, dates, times, SSNs, credit cards,
        currency, IPv4 and MAC addresses.
        """)


if __name__ == "__main__":
    main()
