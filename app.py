import logging
from dataclasses import replace
from typing import List, Optional

import streamlit as st
from pyrsistent import thaw

from traska.components import Position, ScoreEntry
from traska.config import RaceConfig
from traska.renderer import render
from traska.session import GameSession
from traska.step import MoveResult
from traska.types import CellKind, MoveError

logging.basicConfig(level=logging.INFO)

ERROR_MESSAGES = {
    MoveError.INSUFFICIENT_ENERGY: "Not enough energy to move!",
    MoveError.INVALID_TARGET: "You can only fly along the route.",
    MoveError.OUT_OF_BOUNDS: "That tile is outside the map.",
    MoveError.GAME_OVER: "Race finished. Generate a new map or restart.",
    MoveError.NO_GAME: "Generate a map first.",
}

CELL_LABELS = {
    CellKind.EMPTY: "",
    CellKind.PATH: "·",
    CellKind.START: "S",
    CellKind.FINISH: "F",
}

st.set_page_config(layout="wide", page_title="Traska - Space Race")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
        div[data-testid="stHorizontalBlock"] { gap: 0.2rem; }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "race_config" not in st.session_state:
        st.session_state["race_config"] = RaceConfig()
        st.session_state["race_seed_counter"] = 0
        st.session_state["base_seed"] = 0


def get_config_from_widgets() -> RaceConfig:
    config: RaceConfig = st.session_state["race_config"]

    st.subheader("Board")
    grid_size: int = st.slider("Grid size", 3, 16, config.grid_size, key="grid_size")

    st.subheader("Energy")
    initial_energy: int = st.slider(
        "Initial energy", 1, 20, config.initial_energy, key="initial_energy"
    )
    fuel_min, fuel_max = st.slider(
        "Fuel amount range",
        0,
        20,
        (config.fuel_min, config.fuel_max),
        key="fuel_range",
    )
    search_radius: int = st.slider(
        "Legal move search radius", 1, 5, config.search_radius, key="search_radius"
    )

    st.subheader("Random seed")
    st.session_state["base_seed"] = st.number_input(
        "Random seed", min_value=0, value=st.session_state["base_seed"], key="seed"
    )

    return replace(
        config,
        grid_size=grid_size,
        initial_energy=initial_energy,
        fuel_min=fuel_min,
        fuel_max=fuel_max,
        search_radius=search_radius,
    )


def make_session(config: RaceConfig) -> None:
    previous: Optional[GameSession] = st.session_state.get("session")
    session = GameSession(config)
    if previous is not None:
        # Keep the scoreboard across rule changes.
        session.scoreboard = replace(
            previous.scoreboard, capacity=config.scoreboard_size
        )
    st.session_state["session"] = session
    new_map(session)


def new_map(session: GameSession) -> None:
    seed = st.session_state["base_seed"] + st.session_state["race_seed_counter"]
    session.new_game(seed)
    st.session_state["awaiting_name"] = False


def handle_result(result: MoveResult) -> None:
    if result.error is not None:
        st.toast(ERROR_MESSAGES[result.error], icon="⚠️")
    if result.completed is not None:
        st.session_state["awaiting_name"] = True


def cell_label(session: GameSession, pos: Position) -> str:
    state = session.state
    assert state is not None
    if pos == state.position:
        return "🚀"
    cell = state.grid.cell_at(pos)
    if cell.is_fuel:
        return str(cell.amount)
    if pos in state.legal_moves:
        return "◦"
    return CELL_LABELS[cell.kind]


def display_grid(session: GameSession) -> None:
    state = session.state
    assert state is not None
    for y in range(state.grid.size):
        cols = st.columns(state.grid.size)
        for x, col in enumerate(cols):
            pos = Position(x, y)
            with col:
                if st.button(
                    cell_label(session, pos) or " ",
                    key=f"cell_{x}_{y}",
                    use_container_width=True,
                    disabled=not state.grid.is_open(pos),
                ):
                    # Clicking the ship repeats the last vector.
                    if pos == state.position:
                        handle_result(session.attempt_inertia_move())
                    else:
                        handle_result(session.attempt_move(pos))
                    st.rerun()


def display_scoreboard(entries: List[ScoreEntry], best: Optional[ScoreEntry]) -> None:
    st.subheader("Top Scorers")
    if best is not None:
        name = best.name or "(anonymous)"
        st.info(f"**Best run:** {name} in {best.moves} moves", icon="🏆")
    if not entries:
        st.caption("No finished runs yet.")
        return
    st.table(
        [
            {"#": rank, "Name": entry.name or "(anonymous)", "Moves": entry.moves}
            for rank, entry in enumerate(entries, start=1)
        ]
    )


# --------- Main App ---------
set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: RaceConfig = get_config_from_widgets()
    st.session_state["race_config"] = config

    if st.button("🔄 Apply & Generate", key="save_config_btn", use_container_width=True):
        st.session_state["race_seed_counter"] = 0
        make_session(config)
    st.divider()

with tab_game:
    if "session" not in st.session_state:
        make_session(st.session_state["race_config"])

    session: GameSession = st.session_state["session"]
    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🗺️ Generate Map", key="generate_btn", use_container_width=True):
            st.session_state["race_seed_counter"] += 1
            new_map(session)
        if st.button("↩️ Restart", key="restart_btn", use_container_width=True):
            session.restart()
            st.session_state["awaiting_name"] = False
        if st.button("🚀 Inertia Move", key="inertia_btn", use_container_width=True):
            handle_result(session.attempt_inertia_move())

        st.divider()
        display_scoreboard(list(session.scoreboard.entries), session.scoreboard.best)

    with left_col:
        state = session.state
        if state is not None:
            st.info(f"**Energy:** {state.energy}", icon="⚡")
            st.info(f"**Moves:** {state.move_count}", icon="🧭")
            if state.vector is not None:
                st.info(f"**Vector:** ({state.vector.dx}, {state.vector.dy})", icon="➡️")
            if state.stranded:
                st.warning("No reachable tiles left. Restart to try again.")

    with middle_col:
        state = session.state
        completion = session.last_completion
        if state is not None and state.won and completion is not None:
            st.success(f"🎉 **Victory in {completion.moves} moves!** 🎉")
            if st.session_state.get("awaiting_name"):
                with st.form("name_form"):
                    name = st.text_input("Enter your name:")
                    if st.form_submit_button("Save score"):
                        session.record_completion(name, completion.moves)
                        st.session_state["awaiting_name"] = False
                        st.balloons()
                        st.rerun()
        if state is not None:
            display_grid(session)
            with st.expander("Board image"):
                st.image(render(state), use_container_width=True)

with tab_state:
    session = st.session_state["session"]
    if session.state is not None:
        st.json(thaw(session.state.description), expanded=1)
