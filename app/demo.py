"""
minefield - Interactive Demo

Run with: streamlit run app/demo.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st
from typing import Optional

from minefield import PRESETS, GameConfig, GameSession, get_preset
from minefield.config import max_safe_zone_size
from minefield.errors import ConfigurationError
from minefield.generation import MINE
from minefield.positions import ALL_DIRECTIONS, CARDINAL_DIRECTIONS

# Streamlit colour names; button labels accept ":color[text]" markdown.
COLORS = {
    1: "blue",
    2: "green",
    3: "red",
    4: "violet",
    5: "orange",
    6: "blue",
    7: "gray",
    8: "gray",
}


def number_markdown(value: int) -> str:
    """Coloured, bold markdown for an adjacency count."""
    return f":{COLORS[value]}[**{value}**]"


def cell_label(session: GameSession, x: int, y: int, show_mines: bool) -> str:
    """Text shown on a cell button."""
    if session.is_revealed(x, y) or (show_mines and session.started):
        value = session.value_at(x, y)
        if value == MINE:
            return "💣"
        return number_markdown(value) if value else "·"
    if (x, y) in session.flagged:
        return "🚩"
    return " "


def render_legend() -> str:
    """Render the number colour legend as markdown."""
    return "Adjacent mines: " + " ".join(number_markdown(v) for v in COLORS)


def build_config() -> Optional[GameConfig]:
    """Read the sidebar controls into a GameConfig."""
    st.sidebar.header("Game Configuration")

    preset = st.sidebar.selectbox(
        "Difficulty",
        list(PRESETS.keys()) + ["custom"],
        index=0,
    )
    four_way = st.sidebar.checkbox("Four-way flood fill", value=False)

    if preset != "custom":
        base = get_preset(preset)
        width, height, mines = base.width, base.height, base.mines_count
    else:
        width = st.sidebar.slider("Width", 1, 30, 10)
        height = st.sidebar.slider("Height", 1, 24, 10)
        max_mines = max(0, width * height - max_safe_zone_size(width, height))
        mines = st.sidebar.slider("Mines", 0, max(max_mines, 1), min(10, max_mines))

    try:
        config = GameConfig(
            width=width,
            height=height,
            mines_count=mines,
            directions=CARDINAL_DIRECTIONS if four_way else ALL_DIRECTIONS,
        )
        config.check_generatable()
        return config
    except ConfigurationError as exc:
        st.sidebar.error(str(exc))
        return None


def main():
    st.set_page_config(page_title="minefield", page_icon="💣", layout="wide")
    st.title("minefield")

    config = build_config()
    if config is None:
        return

    if "session" not in st.session_state or st.session_state.config != config:
        st.session_state.session = GameSession(config)
        st.session_state.config = config
        st.session_state.status = None

    session: GameSession = st.session_state.session

    col1, col2, col3 = st.columns([1, 1, 2])
    with col1:
        if st.button("New Game", type="primary"):
            session.new_game()
            st.session_state.status = None
            st.rerun()
    with col2:
        flag_mode = st.toggle("Flag mode", value=False)
    with col3:
        st.metric("Mines left", session.mines_remaining)

    status = st.session_state.status
    if status == -1:
        st.error("You hit a mine. You lost.")
    elif status == 1:
        st.success("You revealed all safe cells. You won!")

    show_mines = session.game_over
    for y in range(session.height):
        cols = st.columns(session.width, gap="small")
        for x in range(session.width):
            label = cell_label(session, x, y, show_mines)
            disabled = session.game_over or session.is_revealed(x, y)
            if cols[x].button(label, key=f"cell-{x}-{y}", disabled=disabled):
                if flag_mode:
                    session.toggle_flag(x, y)
                else:
                    new_status, _ = session.reveal(x, y)
                    if new_status != 0:
                        st.session_state.status = new_status
                st.rerun()

    st.markdown(render_legend())


if __name__ == "__main__":
    main()
