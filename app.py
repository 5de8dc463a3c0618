import logging

import streamlit as st

from win98.logging_config import setup_logging
from win98.ui import init_state, render_desktop

def main():
    # Pantalla completa: el escritorio ocupa todo el viewport.
    st.set_page_config(page_title="Windows 98", layout="wide", initial_sidebar_state="collapsed")
    setup_logging(logging.INFO)
    init_state()

    render_desktop()

if __name__ == "__main__":
    main()
