import math

import streamlit as st

from travel_admin.core.config import get_settings
from travel_admin.forms.parsing import parse_float, parse_int
from travel_admin.forms.state import EntityForm
from travel_admin.main import Console, create_client, create_console
from travel_admin.models.domain import DestinationSummary, HotelSummary
from travel_admin.views.display import destination_options
from travel_admin.views.hotel_viewer import HotelViewer
from travel_admin.views.list_view import EntityListView

PAGES = ["Manage Destinations", "Manage Hotels", "View Hotels by Destination"]


@st.cache_resource
def get_client():
    return create_client(get_settings())


def get_console() -> Console:
    if "console" not in st.session_state:
        st.session_state["console"] = create_console(client=get_client())
    return st.session_state["console"]


def show_messages(*views) -> None:
    for view in views:
        if view.error:
            st.error(view.error)
        if view.success:
            st.success(view.success)


def ensure_loaded(view: EntityListView) -> None:
    if not view.loaded and not view.error:
        with st.spinner(f"Loading {view.schema.kind}s..."):
            view.load()


def submit_form(form: EntityForm, entered: dict) -> None:
    for path, value in entered.items():
        form.change_field(path, value)
    with st.spinner("Saving..."):
        form.submit()
    st.rerun()


def delete_controls(view: EntityListView, item: dict, key: str) -> None:
    cols = st.columns(2)
    if cols[0].button("Edit", key=f"edit_{key}"):
        view.edit(item)
        st.rerun()
    if cols[1].button("Delete", key=f"delete_{key}", type="primary"):
        view.delete(item)
        st.rerun()


def pending_delete_prompt(view: EntityListView) -> None:
    if view.pending_delete is None:
        return
    st.warning(view.confirm_prompt)
    cols = st.columns(2)
    if cols[0].button("Yes, delete", key=f"confirm_delete_{view.schema.kind}", type="primary"):
        with st.spinner("Deleting..."):
            view.confirm_delete()
        st.rerun()
    if cols[1].button("Cancel", key=f"cancel_delete_{view.schema.kind}"):
        view.cancel_delete()
        st.rerun()


def destinations_page(console: Console) -> None:
    form = console.destination_form
    view = console.destination_list
    ensure_loaded(view)

    st.header(form.title)
    show_messages(form, view)
    pending_delete_prompt(view)

    gen = form.generation
    with st.form(f"destination_form_{gen}"):
        name = st.text_input("Destination Name *", value=form.value("name"))
        country = st.text_input("Country *", value=form.value("country"))
        description = st.text_area("Description *", value=form.value("description"))
        cols = st.columns(2)
        latitude = cols[0].text_input("Latitude *", value=str(form.value("coordinates.latitude")))
        longitude = cols[1].text_input("Longitude *", value=str(form.value("coordinates.longitude")))
        best_time = st.text_input(
            "Best Time to Visit",
            value=form.value("bestTimeToVisit"),
            placeholder="e.g., March to May",
        )
        cols = st.columns(2)
        currency = cols[0].text_input("Currency", value=form.value("currency"), placeholder="e.g., INR, USD")
        language = cols[1].text_input("Language", value=form.value("language"), placeholder="e.g., Hindi, English")
        submitted = st.form_submit_button(form.submit_label, disabled=form.busy)
        cancelled = form.is_editing and st.form_submit_button("Cancel Edit")

    if cancelled:
        form.reset()
        st.rerun()
    if submitted:
        submit_form(
            form,
            {
                "name": name,
                "country": country,
                "description": description,
                "coordinates.latitude": latitude,
                "coordinates.longitude": longitude,
                "bestTimeToVisit": best_time,
                "currency": currency,
                "language": language,
            },
        )

    st.subheader("Existing Destinations")
    if st.button("Reload", key="reload_destinations"):
        view.load()
        st.rerun()
    for item in view.items:
        summary = DestinationSummary.from_record(item)
        with st.container(border=True):
            st.markdown(f"### {summary.name}")
            st.markdown(f"**Country:** {summary.country}")
            st.markdown(f"**Description:** {summary.description}")
            st.markdown(f"**Coordinates:** {summary.coordinates}")
            if summary.best_time_to_visit:
                st.markdown(f"**Best Time to Visit:** {summary.best_time_to_visit}")
            if summary.currency:
                st.markdown(f"**Currency:** {summary.currency}")
            if summary.language:
                st.markdown(f"**Language:** {summary.language}")
            delete_controls(view, item, key=f"destination_{summary.destination_id}")


def _star_index(value) -> int:
    stars = parse_int(value) or 3
    return min(max(stars, 1), 5) - 1


def _guest_rating(value) -> float:
    rating = parse_float(value)
    if math.isnan(rating):
        return 0.0
    return min(max(rating, 0.0), 5.0)


def show_hotel(summary: HotelSummary, show_destination: bool = True) -> None:
    st.markdown(f"### {summary.name}")
    if show_destination and summary.destination:
        st.markdown(f"**Destination:** {summary.destination}")
    if summary.address:
        st.markdown(f"**Address:** {summary.address}")
    if summary.image_url:
        st.image(summary.image_url, width=320)
    cols = st.columns(2)
    cols[0].markdown(f"**Star Rating:** {'★' * summary.stars}")
    cols[1].markdown(f"**Guest Rating:** {summary.guest_rating}/5")
    st.markdown(f"**Price per Night:** {summary.price}")
    if summary.amenities:
        st.markdown("**Amenities:** " + ", ".join(summary.amenities))
    if summary.attractions:
        st.markdown("**Nearby Attractions:** " + ", ".join(str(a) for a in summary.attractions))
    if summary.room_categories:
        st.markdown("**Room Types:**")
        for room in summary.room_categories:
            st.markdown(f"- **{room.name}**: {room.price}/night")
            if room.amenities:
                st.caption("Amenities: " + ", ".join(room.amenities))
    if summary.landmarks:
        st.markdown("**Nearby Landmarks:**")
        for landmark in summary.landmarks:
            st.markdown(f"- {landmark}")
    if not summary.contact.is_empty:
        st.markdown("**Contact Information:**")
        if summary.contact.phone_number:
            st.markdown(f"📞 {summary.contact.phone_number}")
        if summary.contact.email:
            st.markdown(f"📧 {summary.contact.email}")
        if summary.contact.website:
            st.markdown(f"🌐 [{summary.contact.website}]({summary.contact.website})")


def hotels_page(console: Console, entered: bool = False) -> None:
    form = console.hotel_form
    view = console.hotel_list
    destinations = console.hotel_destinations
    ensure_loaded(view)
    if entered:
        # destinations may have changed on another page
        with st.spinner("Loading destinations..."):
            destinations.load()
    else:
        ensure_loaded(destinations)
    labels = destination_options(destinations.items)

    st.header(form.title)
    show_messages(form, view, destinations)
    pending_delete_prompt(view)

    gen = form.generation
    current_destination = str(form.value("destinationId") or "")
    choices = [""] + list(labels)
    if current_destination and current_destination not in labels:
        choices.append(current_destination)

    with st.form(f"hotel_form_{gen}"):
        name = st.text_input("Hotel Name *", value=form.value("name"))
        destination_id = st.selectbox(
            "Destination *",
            options=choices,
            index=choices.index(current_destination),
            format_func=lambda value: labels.get(value, value) if value else "Select a destination",
        )
        address = st.text_area("Address *", value=form.value("address"))
        image_url = st.text_input("Hotel Image URL", value=form.value("imageUrl"), placeholder="add website link")
        cols = st.columns(3)
        star_rating = cols[0].selectbox(
            "Star Rating *",
            options=[1, 2, 3, 4, 5],
            index=_star_index(form.value("starRating")),
            format_func=lambda stars: f"{stars} Star" if stars == 1 else f"{stars} Stars",
        )
        guest_rating = cols[1].number_input(
            "Guest Rating (0-5)",
            min_value=0.0,
            max_value=5.0,
            step=0.1,
            value=_guest_rating(form.value("guestRating")),
        )
        price = cols[2].text_input("Price per Night *", value=str(form.value("pricePerNight")))
        amenities = st.text_input(
            "Hotel Amenities", value=form.value("hotelAmenities"), placeholder="e.g., Free Wi-Fi, Pool"
        )
        attractions = st.text_input(
            "Nearby Attractions",
            value=form.value("nearbyAttractions"),
            placeholder="e.g., Beach|5km, Park|2km",
        )
        st.markdown("#### Contact Information")
        cols = st.columns(3)
        phone = cols[0].text_input("Phone Number", value=form.value("contactInfo.phoneNumber"))
        email = cols[1].text_input("Email", value=form.value("contactInfo.email"))
        website = cols[2].text_input("Website", value=form.value("contactInfo.website"))
        submitted = st.form_submit_button(form.submit_label, disabled=form.busy)
        cancelled = form.is_editing and st.form_submit_button("Cancel Edit")

    if cancelled:
        form.reset()
        st.rerun()
    if submitted:
        submit_form(
            form,
            {
                "name": name,
                "destinationId": destination_id,
                "address": address,
                "imageUrl": image_url,
                "starRating": star_rating,
                "guestRating": guest_rating,
                "pricePerNight": price,
                "hotelAmenities": amenities,
                "nearbyAttractions": attractions,
                "contactInfo.phoneNumber": phone,
                "contactInfo.email": email,
                "contactInfo.website": website,
            },
        )

    st.subheader("Existing Hotels")
    if st.button("Reload", key="reload_hotels"):
        view.load()
        destinations.load()
        st.rerun()
    for item in view.items:
        summary = HotelSummary.from_record(item, console.price_format, destination_labels=labels)
        with st.container(border=True):
            show_hotel(summary)
            delete_controls(view, item, key=f"hotel_{summary.hotel_id}")


def viewer_page(console: Console) -> None:
    viewer: HotelViewer = st.session_state.get("viewer")
    if viewer is None:
        viewer = console.new_viewer()
        st.session_state["viewer"] = viewer
        with st.spinner("Loading destinations..."):
            viewer.activate()

    st.header("View Hotels by Destination")
    if viewer.error:
        st.error(viewer.error)

    labels = destination_options(viewer.destinations)
    st.selectbox(
        "Select Destination",
        options=[""] + list(labels),
        format_func=lambda value: labels.get(value, value) if value else "Choose a destination...",
        key="viewer_destination",
        on_change=lambda: viewer.select_destination(st.session_state["viewer_destination"]),
    )

    if not viewer.selected_destination_id:
        return

    st.subheader("Destination Information")
    info = viewer.destination_summary()
    if info is None:
        st.write("No destination information available.")
    else:
        st.markdown(f"#### {info.label}")
        if info.description:
            st.markdown(f"**Description:** {info.description}")
        if info.has_coordinates:
            st.markdown(f"**Coordinates:** {info.coordinates}")
        if info.best_time_to_visit:
            st.markdown(f"**Best Time to Visit:** {info.best_time_to_visit}")
        if info.currency:
            st.markdown(f"**Currency:** {info.currency}")
        if info.language:
            st.markdown(f"**Language:** {info.language}")

    if viewer.loading:
        st.info("Loading hotels...")
        return

    summaries = viewer.hotel_summaries()
    st.subheader(f"Available Hotels ({len(summaries)})")
    if not summaries:
        st.info(
            "No hotels found for this destination. "
            "Add some hotels using the Hotel Management section."
        )
    for summary in summaries:
        with st.container(border=True):
            show_hotel(summary, show_destination=False)


def leave_viewer() -> None:
    viewer = st.session_state.pop("viewer", None)
    if viewer is not None:
        viewer.close()
    st.session_state.pop("viewer_destination", None)


settings = get_settings()
st.set_page_config(page_title=settings.app_name, layout="wide")
st.title("Welcome")
st.caption(f"{settings.app_name} | API: {settings.api_base_url}")

console = get_console()
page = st.sidebar.radio("Navigation", PAGES)
entered = st.session_state.get("page") != page
st.session_state["page"] = page

if page != PAGES[2]:
    leave_viewer()

if page == PAGES[0]:
    destinations_page(console)
elif page == PAGES[1]:
    hotels_page(console, entered)
else:
    viewer_page(console)
