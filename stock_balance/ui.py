# stock_balance/ui.py
from datetime import datetime

import streamlit as st

from . import settings
from .presenter import format_quantity
from .processor import export_records
from .session import InventorySession

SESSION_KEY = "inventory_session"
UPLOAD_TOKEN_KEY = "inventory_upload_token"


def get_session() -> InventorySession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = InventorySession()
    return st.session_state[SESSION_KEY]


def _multiselect_with_all(label: str, options, key: str):
    select_all = st.checkbox('انتخاب همه', key=f'{key}_all')
    if select_all:
        st.multiselect(label, options, default=options, key=f'{key}_locked', disabled=True)
        return list(options)
    return st.multiselect(label, options, key=key, placeholder=f'انتخاب {label}')


def render_upload(session: InventorySession):
    uploaded = st.file_uploader('فایل اکسل گزارش را بارگذاری کنید', type=['xlsx', 'xls'])

    # Streamlit reruns the whole script; only react when the upload actually changes
    token = (uploaded.name, uploaded.size) if uploaded is not None else None
    if token != st.session_state.get(UPLOAD_TOKEN_KEY):
        st.session_state[UPLOAD_TOKEN_KEY] = token
        if uploaded is None:
            session.remove_file()
        else:
            session.select_file(uploaded.name, uploaded.type)

    if st.button('پردازش فایل', disabled=session.file_name is None or uploaded is None):
        with st.spinner('در حال پردازش...'):
            session.process(uploaded.getvalue())


def render_message(session: InventorySession, slot):
    if session.message is None:
        return
    if session.message.type == 'success':
        slot.success(session.message.text)
    else:
        slot.error(session.message.text)


def render_filters(session: InventorySession):
    if not session.can_filter:
        return

    st.markdown('---')
    cols = st.columns(2)
    with cols[0]:
        warehouses = _multiselect_with_all(
            'نام انبار', session.processed.warehouse_names, key=f'warehouses_{session.revision}'
        )
    with cols[1]:
        products = _multiselect_with_all(
            'نام کالا', session.processed.product_names, key=f'products_{session.revision}'
        )
    session.update_selection(products=products, warehouses=warehouses)

    if st.button('اعمال فیلتر و محاسبه موجودی'):
        session.apply()


def render_result(session: InventorySession):
    if session.applied is None:
        return

    description = session.describe()
    st.markdown('---')
    st.subheader('فیلترهای انتخاب شده برای محاسبه:')
    st.markdown(f'**نام انبار:** {description.itemized_summary.warehouses}')
    st.markdown(f'**نام کالا:** {description.itemized_summary.products}')

    if session.result is None:
        return

    st.header(description.title)
    st.markdown(f'## {format_quantity(session.result.total)}')

    with st.expander(f'رکوردهای مطابق ({session.result.row_count})'):
        st.dataframe(session.result.filtered_records.head(settings.PREVIEW_ROWS), use_container_width=True)

    st.download_button(
        'دانلود رکوردهای مطابق (Excel)',
        data=export_records(session.result.filtered_records),
        file_name=f'inventory_balance_{datetime.utcnow().strftime("%Y%m%dT%H%M%SZ")}.xlsx',
    )


def render_ui():
    session = get_session()
    render_upload(session)
    # filled last: applying the filters below replaces the message
    message_slot = st.empty()
    render_filters(session)
    render_result(session)
    render_message(session, message_slot)
