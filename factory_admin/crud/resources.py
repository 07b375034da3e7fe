# factory_admin/crud/resources.py
"""
Entity registry for the list + form + status-toggle screens

Each ResourceSpec describes one backend entity: its endpoints, the form
fields sent on add/update, the searchable and filterable columns, the
table columns and the stats-card row. Paths are templates filled by
ApiClient.build_path(); {token} is always the session token.

Version: 1.3.0
Changes:
- v1.3.0: Stock transactions (vendor receipts, production receipts, FG adjustments);
          related rows can come from the record itself
- v1.2.0: Related lists for detail dialogs (client dispatches, vendor materials,
          batch stages, category members)
- v1.1.0: Master Data lookup tables
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

CREATE = 'create'
UPDATE = 'update'
BOTH = (CREATE, UPDATE)

GROUP_CORE = 'core'
GROUP_MASTER = 'master'
GROUP_ADMIN = 'admin'
GROUP_STOCK = 'stock'


# ==================== Spec Types ====================

@dataclass
class FieldSpec:
    """
    One form field

    Attributes:
        name: form part name sent to the backend
        label: UI label
        kind: text, textarea, email, number, int, date, select, json
        required: blocks submission when empty
        column: record key used to pre-populate on edit (defaults to name)
        options: static select options
        options_source: resource key whose list feeds a select box
        option_label: column of options_source used as label
        option_value: 'id' submits the record id, 'label' submits the label text
        modes: create and/or update
    """
    name: str
    label: str
    kind: str = 'text'
    required: bool = False
    column: Optional[str] = None
    options: Optional[List[str]] = None
    options_source: Optional[str] = None
    option_label: Optional[str] = None
    option_value: str = 'id'
    default: Any = None
    help: Optional[str] = None
    modes: Tuple[str, ...] = BOTH

    def __post_init__(self):
        if self.column is None:
            self.column = self.name

    def applies_to(self, mode: str) -> bool:
        return mode in self.modes


@dataclass
class FilterSpec:
    """Exact-match dropdown filter over one column"""
    column: str
    label: str
    options: Optional[List[str]] = None


@dataclass
class StatSpec:
    """
    One stats card

    kind: count (all rows), equals (column == value), this_month (date column
    in current month), sum / mean (numeric column)
    """
    label: str
    kind: str = 'count'
    column: Optional[str] = None
    value: Any = None
    icon: str = '📋'


@dataclass
class RelatedSpec:
    """
    Secondary read-only list shown in the detail dialog

    path None means the rows sit on the record itself under list_key.
    """
    title: str
    path: Optional[str]
    list_key: str = 'data'
    columns: Dict[str, str] = field(default_factory=dict)


@dataclass
class ResourceSpec:
    key: str
    title: str
    icon: str
    list_path: str
    add_path: Optional[str] = None
    update_path: Optional[str] = None
    status_path: Optional[str] = None
    details_path: Optional[str] = None
    group: str = GROUP_CORE
    list_key: str = 'data'
    id_field: str = 'id'
    id_param: str = 'id'
    name_column: str = 'name'
    status_column: Optional[str] = 'status'
    fields: List[FieldSpec] = field(default_factory=list)
    search_columns: List[str] = field(default_factory=list)
    filters: List[FilterSpec] = field(default_factory=list)
    columns: Dict[str, str] = field(default_factory=dict)
    stats: List[StatSpec] = field(default_factory=list)
    related: Optional[RelatedSpec] = None

    @property
    def can_create(self) -> bool:
        return bool(self.add_path)

    @property
    def can_update(self) -> bool:
        return bool(self.update_path)

    @property
    def can_toggle_status(self) -> bool:
        return bool(self.status_path) and bool(self.status_column)

    def form_fields(self, mode: str) -> List[FieldSpec]:
        return [f for f in self.fields if f.applies_to(mode)]

    def required_fields(self, mode: str) -> List[FieldSpec]:
        return [f for f in self.form_fields(mode) if f.required]


def _active_stats(total_label: str, icon: str = '📋') -> List[StatSpec]:
    return [
        StatSpec(total_label, 'count', icon=icon),
        StatSpec('Active', 'equals', column='status', value=1, icon='🟢'),
        StatSpec('Inactive', 'equals', column='status', value=0, icon='⭕'),
    ]


def _status_filter() -> FilterSpec:
    return FilterSpec('status_label', 'Status', ['Active', 'Inactive'])


def _standard_paths(entity: str) -> Dict[str, str]:
    """Default endpoint convention: {entity}/get-all|add|update|change-status"""
    return {
        'list_path': f'{entity}/get-all/{{token}}',
        'add_path': f'{entity}/add',
        'update_path': f'{entity}/update',
        'status_path': f'{entity}/change-status/{{id}}/{{status}}/{{token}}',
    }


# ==================== Core Entities ====================

CLIENTS = ResourceSpec(
    key='clients',
    title='Clients',
    icon='👥',
    **_standard_paths('clients'),
    id_param='client_id',
    name_column='client_name',
    fields=[
        FieldSpec('client_name', 'Client Name', required=True),
        FieldSpec('contact_person', 'Contact Person', required=True),
        FieldSpec('client_type', 'Client Type', 'select', required=True,
                  options_source='client_types', option_label='type_name', option_value='label'),
        FieldSpec('email', 'Email', 'email', required=True),
        FieldSpec('phone', 'Phone', required=True),
        FieldSpec('website', 'Website'),
        FieldSpec('gst_number', 'GST Number', required=True),
        FieldSpec('credit_limit', 'Credit Limit', 'number', default=0.0),
        FieldSpec('payment_terms', 'Payment Terms', 'select',
                  options_source='payment_terms', option_label='term_name', option_value='label'),
        FieldSpec('billing_address', 'Billing Address', 'textarea', required=True),
        FieldSpec('billing_addr_city', 'Billing City', required=True),
        FieldSpec('billing_addr_state', 'Billing State', required=True),
        FieldSpec('billing_addr_pincode', 'Billing Pincode', required=True),
        FieldSpec('shipping_address', 'Shipping Address', 'textarea', required=True),
        FieldSpec('shipping_addr_city', 'Shipping City', required=True),
        FieldSpec('shipping_addr_state', 'Shipping State', required=True),
        FieldSpec('shipping_addr_pincode', 'Shipping Pincode', required=True),
        FieldSpec('notes', 'Notes', 'textarea', required=True),
    ],
    search_columns=['client_name', 'contact_person', 'email'],
    filters=[_status_filter(), FilterSpec('client_type', 'Type')],
    columns={
        'client_name': 'Client',
        'contact_person': 'Contact',
        'email': 'Email',
        'phone': 'Phone',
        'client_type': 'Type',
        'billing_addr_city': 'City',
        'credit_limit': 'Credit Limit',
        'status_label': 'Status',
    },
    stats=[
        StatSpec('Total Clients', 'count', icon='👥'),
        StatSpec('Active Clients', 'equals', column='status', value=1, icon='🏢'),
        StatSpec('New This Month', 'this_month', column='created_at', icon='🆕'),
    ],
    related=RelatedSpec(
        'Dispatch Orders',
        'dispatch-orders/get-by-customer/{id}/{token}',
        columns={
            'dispatch_id': 'Dispatch',
            'order_reference': 'Reference',
            'dispatch_date': 'Date',
            'dispatch_status': 'Status',
            'grand_total': 'Total',
        },
    ),
)

VENDORS = ResourceSpec(
    key='vendors',
    title='Vendors',
    icon='🏭',
    list_path='vendors/get-vendors/{token}',
    add_path='vendors/add-vendor',
    update_path='vendors/update-vendor',
    status_path='vendors/change-vendor-status/{id}/{status}/{token}',
    details_path='vendors/get-vendor-details/{id}/{token}',
    id_param='vendorId',
    name_column='vendor_name',
    fields=[
        FieldSpec('vendorName', 'Vendor Name', required=True, column='vendor_name'),
        FieldSpec('contactPerson', 'Contact Person', required=True, column='contact_person'),
        FieldSpec('email', 'Email', 'email', required=True),
        FieldSpec('phone', 'Phone', required=True),
        FieldSpec('brandId', 'Brand', 'select', column='brand_id',
                  options_source='brands', option_label='brand_name'),
        FieldSpec('address', 'Address', 'textarea'),
        FieldSpec('city', 'City'),
        FieldSpec('state', 'State'),
        FieldSpec('pincode', 'Pincode'),
        FieldSpec('gstNo', 'GST No', column='gst_no'),
        FieldSpec('panNo', 'PAN No', column='pan_no'),
        FieldSpec('bankName', 'Bank Name', column='bank_name'),
        FieldSpec('accountNo', 'Account No', column='account_no'),
        FieldSpec('ifscCode', 'IFSC Code', column='ifsc_code'),
        FieldSpec('paymentTerms', 'Payment Terms', 'select', column='payment_terms',
                  options_source='payment_terms', option_label='term_name', option_value='label'),
        FieldSpec('creditLimit', 'Credit Limit', 'number', column='credit_limit', default=0.0),
        FieldSpec('notes', 'Notes', 'textarea'),
    ],
    search_columns=['vendor_name', 'brand_name', 'brand'],
    filters=[_status_filter()],
    columns={
        'vendor_name': 'Vendor',
        'contact_person': 'Contact',
        'email': 'Email',
        'phone': 'Phone',
        'brand_name': 'Brand',
        'on_time_percentage': 'On-Time %',
        'status_label': 'Status',
    },
    stats=_active_stats('Total Vendors', '🏭') + [
        StatSpec('Avg On-Time %', 'mean', column='on_time_percentage', icon='⏱️'),
    ],
    related=RelatedSpec(
        'Supplied Materials',
        'vendors/get-vendor-details/{id}/{token}',
        list_key='raw_materials',
        columns={'material_code': 'Code', 'material_name': 'Material', 'unit_of_measure': 'UOM'},
    ),
)

RAW_MATERIALS = ResourceSpec(
    key='raw_materials',
    title='Raw Materials',
    icon='🧱',
    **_standard_paths('raw-materials'),
    details_path='raw-materials/get-details/{id}/{token}',
    id_param='materialId',
    name_column='material_name',
    fields=[
        FieldSpec('materialCode', 'Material Code', required=True, column='material_code'),
        FieldSpec('materialName', 'Material Name', required=True, column='material_name'),
        FieldSpec('materialDescription', 'Description', 'textarea', column='material_description'),
        FieldSpec('rawMaterialCategoryId', 'Category', 'select', required=True,
                  column='raw_material_category_id',
                  options_source='raw_material_categories', option_label='category_name'),
        FieldSpec('vendorId', 'Vendor', 'select', column='vendor_id',
                  options_source='vendors', option_label='vendor_name'),
        FieldSpec('specification', 'Specification', 'textarea'),
        FieldSpec('stockQty', 'Stock Qty', 'number', column='stock_qty', default=0.0),
        FieldSpec('minStockLevel', 'Min Stock Level', 'number', column='min_stock_level', default=0.0),
        FieldSpec('maxStockLevel', 'Max Stock Level', 'number', column='max_stock_level', default=0.0),
        FieldSpec('unitOfMeasure', 'Unit of Measure', 'select', required=True, column='unit_of_measure',
                  options_source='units', option_label='unit_name'),
        FieldSpec('storageLocationId', 'Storage Location', 'select', column='storage_location_id',
                  options_source='stock_locations', option_label='location_label'),
        FieldSpec('unitCost', 'Unit Cost', 'number', column='unit_cost', default=0.0),
    ],
    search_columns=['material_name', 'material_code', 'vendor_name', 'category_name'],
    filters=[
        _status_filter(),
        FilterSpec('category_name', 'Category'),
        FilterSpec('stock_status', 'Stock Status'),
    ],
    columns={
        'material_code': 'Code',
        'material_name': 'Material',
        'category_name': 'Category',
        'vendor_name': 'Vendor',
        'stock_qty': 'Stock',
        'min_stock_level': 'Min',
        'unit_of_measure': 'UOM',
        'unit_cost': 'Unit Cost',
        'stock_status': 'Stock Status',
        'status_label': 'Status',
    },
    stats=[
        StatSpec('Total Materials', 'count', icon='🧱'),
        StatSpec('Low Stock', 'equals', column='stock_status', value='low_stock', icon='🟠'),
        StatSpec('Out of Stock', 'equals', column='stock_status', value='out_of_stock', icon='🔴'),
        StatSpec('Total Value', 'sum', column='total_value', icon='💰'),
    ],
)

FINISHED_GOODS = ResourceSpec(
    key='finished_goods',
    title='Finished Goods',
    icon='📦',
    list_path='finished-goods/get-all/{token}',
    update_path='finished-goods/update',
    details_path='finished-goods/get-details/{id}/{token}',
    status_column=None,
    id_param='fgId',
    name_column='product_name',
    fields=[
        FieldSpec('productName', 'Product Name', required=True, column='product_name'),
        FieldSpec('skuCode', 'SKU Code', required=True, column='sku_code'),
        FieldSpec('brandId', 'Brand', 'select', column='brand_id',
                  options_source='brands', option_label='brand_name'),
        FieldSpec('productCategoryId', 'Category', 'select', column='product_category_id',
                  options_source='product_categories', option_label='product_category_name'),
        FieldSpec('minLevel', 'Min Level', 'number', column='min_level', default=0.0),
        FieldSpec('maxLevel', 'Max Level', 'number', column='max_level', default=0.0),
        FieldSpec('storageLocationId', 'Storage Location', 'select', column='storage_location_id',
                  options_source='stock_locations', option_label='location_label'),
        FieldSpec('unitPrice', 'Unit Price', 'number', column='unit_price', default=0.0),
        FieldSpec('rawMaterialCost', 'Raw Material Cost', 'number', column='raw_material_cost', default=0.0),
        FieldSpec('velocity', 'Velocity', 'select', options=['fast', 'medium', 'slow']),
        FieldSpec('goodsStatus', 'Goods Status', 'select', column='goods_status',
                  options=['in_stock', 'low_stock', 'out_of_stock']),
        FieldSpec('lastProduced', 'Last Produced', 'date', column='last_produced'),
    ],
    search_columns=['product_name', 'sku_code', 'brand_name'],
    filters=[
        FilterSpec('goods_status', 'Stock Status'),
        FilterSpec('product_category_name', 'Category'),
    ],
    columns={
        'sku_code': 'SKU',
        'product_name': 'Product',
        'brand_name': 'Brand',
        'product_category_name': 'Category',
        'stock_qty': 'Stock',
        'min_level': 'Min',
        'max_level': 'Max',
        'location_label': 'Location',
        'goods_status': 'Status',
    },
    stats=[
        StatSpec('Total Products', 'count', icon='📦'),
        StatSpec('In Stock', 'equals', column='goods_status', value='in_stock', icon='🟢'),
        StatSpec('Low Stock', 'equals', column='goods_status', value='low_stock', icon='🟠'),
        StatSpec('Out of Stock', 'equals', column='goods_status', value='out_of_stock', icon='🔴'),
    ],
)

PURCHASE_ORDERS = ResourceSpec(
    key='purchase_orders',
    title='Purchase Orders',
    icon='🛒',
    list_path='purchase-orders/get-all/{token}',
    add_path='purchase-orders/add',
    update_path='purchase-orders/update',
    status_column=None,
    id_param='poId',
    name_column='po_number',
    fields=[
        FieldSpec('vendorId', 'Vendor', 'select', required=True, column='vendor_id',
                  options_source='vendors', option_label='vendor_name'),
        FieldSpec('expectedDispatchDate', 'Expected Dispatch Date', 'date', required=True,
                  column='expected_dispatch_date'),
        FieldSpec('notes', 'Notes', 'textarea'),
        FieldSpec('poItems', 'Items (JSON)', 'json', required=True, column='items',
                  help='[{"rawMaterialId": 1, "quantity": 10, "unitPrice": 5.5}]'),
    ],
    search_columns=['po_number', 'vendor_name'],
    filters=[FilterSpec('po_status', 'PO Status', ['pending', 'partial', 'completed', 'overdue'])],
    columns={
        'po_number': 'PO No',
        'vendor_name': 'Vendor',
        'expected_dispatch_date': 'Expected',
        'grand_total': 'Total',
        'completion_percent': 'Received %',
        'po_status': 'Status',
    },
    stats=[
        StatSpec('Total POs', 'count', icon='🛒'),
        StatSpec('Pending', 'equals', column='po_status', value='pending', icon='⏳'),
        StatSpec('Partial', 'equals', column='po_status', value='partial', icon='⚠️'),
        StatSpec('Completed', 'equals', column='po_status', value='completed', icon='✔️'),
    ],
    related=RelatedSpec(
        'Items',
        None,
        list_key='items',
        columns={
            'alias': 'Item',
            'raw_material_description': 'Description',
            'ordered_qty': 'Ordered',
            'received_qty': 'Received',
            'unit_price': 'Unit Price',
            'item_status': 'Status',
        },
    ),
)

ORDERS = ResourceSpec(
    key='orders',
    title='Orders',
    icon='🧾',
    list_path='orders/get-all/{token}',
    add_path='orders/create',
    update_path='orders/update',
    details_path='orders/get-details/{id}/{token}',
    status_column=None,
    id_param='orderId',
    name_column='order_code',
    fields=[
        FieldSpec('clientId', 'Client', 'select', required=True, column='client_id',
                  options_source='clients', option_label='client_name'),
        FieldSpec('productSkuId', 'Product SKU', 'select', column='product_sku_id',
                  options_source='product_skus', option_label='product_name'),
        FieldSpec('quantity', 'Quantity', 'int', required=True, default=1),
        FieldSpec('expectedDeliveryDate', 'Expected Delivery', 'date', required=True,
                  column='expected_delivery_date'),
        FieldSpec('rawMaterialsJson', 'Custom Raw Materials (JSON)', 'json', column='raw_materials_json',
                  help='Only for custom products without a SKU'),
        FieldSpec('notes', 'Notes', 'textarea'),
        FieldSpec('orderStatus', 'Order Status', 'select', column='order_status',
                  options=['pending', 'in_production', 'completed', 'cancelled'], modes=(UPDATE,)),
    ],
    search_columns=['order_code', 'client_name', 'product_name'],
    filters=[FilterSpec('order_status', 'Status')],
    columns={
        'order_code': 'Reference',
        'client_name': 'Client',
        'product_name': 'Product',
        'quantity': 'Qty',
        'expected_delivery_date': 'Est. Delivery',
        'order_status': 'Status',
        'created_at': 'Created',
    },
    stats=[
        StatSpec('Total Orders', 'count', icon='🧾'),
        StatSpec('Pending', 'equals', column='order_status', value='pending', icon='⏳'),
        StatSpec('In Production', 'equals', column='order_status', value='in_production', icon='🔄'),
        StatSpec('This Month', 'this_month', column='created_at', icon='📅'),
    ],
)

PRODUCTION_BATCHES = ResourceSpec(
    key='production_batches',
    title='Production Batches',
    icon='🏭',
    **_standard_paths('production-batches'),
    details_path='production-batches/get-details/{id}/{token}',
    id_param='batchId',
    name_column='batch_code',
    fields=[
        FieldSpec('productId', 'Product SKU', 'select', column='product_id',
                  options_source='product_skus', option_label='product_name'),
        FieldSpec('quantity', 'Quantity', 'int', required=True, default=1),
        FieldSpec('clientId', 'Client', 'select', column='client_id',
                  options_source='clients', option_label='client_name'),
        FieldSpec('expectedCompletionDate', 'Expected Completion', 'date', required=True,
                  column='expected_completion_date'),
        FieldSpec('productionHeadEmployeeId', 'Production Head', 'select', required=True,
                  column='production_head_employee_id',
                  options_source='employees', option_label='name'),
        FieldSpec('stageCategoryId', 'Stage Category', 'select', column='stage_category_id',
                  options_source='production_stage_categories', option_label='category_name'),
        FieldSpec('floor', 'Floor', 'int', default=0),
        FieldSpec('productionNotes', 'Notes', 'textarea', column='production_notes'),
        FieldSpec('manualProduct', 'Custom Product (JSON)', 'json', column='manual_product',
                  help='{"productName": "...", "rawMaterials": [{"rawMaterialId": "1", "quantity": 2}]}',
                  modes=(CREATE,)),
        FieldSpec('ordersId', 'Source Order', 'int', column='orders_id', modes=(CREATE,)),
        FieldSpec('batchStatus', 'Batch Status', 'select', column='batch_status',
                  options=['pending', 'in_progress', 'on_hold', 'completed'], modes=(UPDATE,)),
    ],
    search_columns=['product_name', 'batch_code', 'client_name'],
    filters=[
        FilterSpec('batch_status', 'Batch Status', ['pending', 'in_progress', 'on_hold', 'completed']),
        _status_filter(),
    ],
    columns={
        'batch_code': 'Batch',
        'product_name': 'Product',
        'client_name': 'Client',
        'quantity': 'Qty',
        'completed_qty': 'Done',
        'expected_completion_date': 'Expected',
        'production_head_name': 'Head',
        'batch_status': 'Progress',
        'status_label': 'Status',
    },
    stats=[
        StatSpec('Total Batches', 'count', icon='🏭'),
        StatSpec('In Progress', 'equals', column='batch_status', value='in_progress', icon='🔄'),
        StatSpec('On Hold', 'equals', column='batch_status', value='on_hold', icon='⏸️'),
        StatSpec('Completed', 'equals', column='batch_status', value='completed', icon='✔️'),
    ],
    related=RelatedSpec(
        'Production Stages',
        'production-batches/get-details/{id}/{token}',
        list_key='stages',
        columns={'stage_name': 'Stage', 'stage_head_name': 'Head', 'stage_status': 'Status'},
    ),
)

DISPATCH_ORDERS = ResourceSpec(
    key='dispatch_orders',
    title='Dispatch',
    icon='🚚',
    list_path='dispatch-orders/get-all/{token}',
    add_path='dispatch-orders/add',
    update_path='dispatch-orders/update',
    status_column=None,
    id_param='dispatchOrderId',
    name_column='dispatch_id',
    fields=[
        FieldSpec('orderReference', 'Order Reference', required=True, column='order_reference'),
        FieldSpec('customerId', 'Customer', 'select', required=True, column='customer_id',
                  options_source='clients', option_label='client_name'),
        FieldSpec('shippingAddress', 'Shipping Address', 'textarea', required=True,
                  column='shipping_address'),
        FieldSpec('priority', 'Priority', 'select', options=['low', 'normal', 'high', 'urgent'],
                  default='normal'),
        FieldSpec('noOfBoxes', 'No. of Boxes', 'int', column='no_of_boxes', default=1),
        FieldSpec('grandTotal', 'Grand Total', 'number', column='grand_total', default=0.0),
        FieldSpec('dispatchDate', 'Dispatch Date', 'date', required=True, column='dispatch_date'),
        FieldSpec('itemsToDispatch', 'Items (JSON)', 'json', required=True, column='items',
                  help='[{"productId": 1, "quantity": 5, "unitPrice": 100}]'),
        FieldSpec('notes', 'Notes', 'textarea'),
        FieldSpec('dispatchStatus', 'Dispatch Status', 'select', column='dispatch_status',
                  options=['pending', 'dispatched', 'delivered', 'cancelled'], modes=(UPDATE,)),
    ],
    search_columns=['dispatch_id', 'order_reference', 'customer_name'],
    filters=[FilterSpec('dispatch_status', 'Status', ['pending', 'dispatched', 'delivered', 'cancelled'])],
    columns={
        'dispatch_id': 'Dispatch',
        'order_reference': 'Reference',
        'customer_name': 'Customer',
        'no_of_boxes': 'Boxes',
        'grand_total': 'Total',
        'dispatch_date': 'Date',
        'dispatch_status': 'Status',
    },
    stats=[
        StatSpec('Total Dispatches', 'count', icon='🚚'),
        StatSpec('Pending', 'equals', column='dispatch_status', value='pending', icon='⏳'),
        StatSpec('Dispatched', 'equals', column='dispatch_status', value='dispatched', icon='🚚'),
        StatSpec('Delivered', 'equals', column='dispatch_status', value='delivered', icon='📦'),
    ],
)

QC_RECORDS = ResourceSpec(
    key='qc_records',
    title='Quality Control',
    icon='🔬',
    **_standard_paths('qc-records'),
    id_param='qcId',
    name_column='qc_code',
    fields=[
        FieldSpec('entityType', 'Inspected Entity', 'select', required=True, column='entity_type',
                  options=['raw_material', 'production_batch', 'finished_good']),
        FieldSpec('entityId', 'Entity ID', 'int', required=True, column='entity_id'),
        FieldSpec('itemName', 'Item Name', required=True, column='item_name'),
        FieldSpec('inspectorName', 'Inspector', required=True, column='inspector_name'),
        FieldSpec('testTypeId', 'Test / Defect Type', 'select', column='test_type_id',
                  options_source='defect_types', option_label='defect_name'),
        FieldSpec('testParameters', 'Test Parameters', 'textarea', column='test_parameters'),
        FieldSpec('result', 'Result', 'select', required=True, options=['pass', 'fail', 'pending']),
        FieldSpec('defect_count', 'Defect Count', 'int', default=0),
        FieldSpec('remarks', 'Remarks', 'textarea'),
    ],
    search_columns=['qc_code', 'item_name', 'inspector_name'],
    filters=[
        FilterSpec('result', 'Result', ['pass', 'fail', 'pending']),
        FilterSpec('entity_type', 'Entity'),
        _status_filter(),
    ],
    columns={
        'qc_code': 'QC Code',
        'entity_type': 'Entity',
        'item_name': 'Item',
        'inspector_name': 'Inspector',
        'result': 'Result',
        'defect_count': 'Defects',
        'created_at': 'Date',
        'status_label': 'Status',
    },
    stats=[
        StatSpec('Total Inspections', 'count', icon='🔬'),
        StatSpec('Passed', 'equals', column='result', value='pass', icon='✅'),
        StatSpec('Failed', 'equals', column='result', value='fail', icon='❌'),
        StatSpec('This Month', 'this_month', column='created_at', icon='📅'),
    ],
)

DEFECT_TYPES = ResourceSpec(
    key='defect_types',
    title='Defect Types',
    icon='🧪',
    list_path='defect-types/get-defect-types/{token}',
    add_path='defect-types/add-defect-type',
    update_path='defect-types/update-defect-type',
    status_path='defect-types/change-defect-type-status/{id}/{status}/{token}',
    id_param='defectTypeId',
    name_column='defect_name',
    fields=[
        FieldSpec('defectName', 'Defect Name', required=True, column='defect_name'),
        FieldSpec('description', 'Description', 'textarea'),
    ],
    search_columns=['defect_name', 'description'],
    filters=[_status_filter()],
    columns={'defect_name': 'Defect', 'description': 'Description', 'status_label': 'Status'},
    stats=_active_stats('Defect Types', '🧪'),
)

EMPLOYEES = ResourceSpec(
    key='employees',
    title='Employees',
    icon='🧑‍🏭',
    **_standard_paths('employees'),
    details_path='employees/get-details/{id}/{token}',
    id_param='employeeId',
    fields=[
        FieldSpec('employeeCode', 'Employee Code', required=True, column='employee_code'),
        FieldSpec('name', 'Name', required=True),
        FieldSpec('phone', 'Phone', required=True),
        FieldSpec('email', 'Email', 'email', required=True),
        FieldSpec('departmentId', 'Department', 'select', required=True, column='department_id',
                  options_source='departments', option_label='department_name'),
        FieldSpec('role', 'Role'),
        FieldSpec('empStatus', 'Employment Status', 'select', column='emp_status',
                  options=['active', 'on_leave', 'resigned'], modes=(UPDATE,)),
    ],
    search_columns=['name', 'employee_code', 'email', 'department_name'],
    filters=[_status_filter(), FilterSpec('department_name', 'Department')],
    columns={
        'employee_code': 'Code',
        'name': 'Name',
        'department_name': 'Department',
        'role': 'Role',
        'phone': 'Phone',
        'email': 'Email',
        'status_label': 'Status',
    },
    stats=_active_stats('Total Employees', '🧑‍🏭'),
)

DEPARTMENTS = ResourceSpec(
    key='departments',
    title='Departments',
    icon='🏬',
    **_standard_paths('departments'),
    details_path='departments/get-details/{id}/{token}',
    id_param='departmentId',
    name_column='department_name',
    fields=[
        FieldSpec('departmentCode', 'Department Code', required=True, column='department_code'),
        FieldSpec('departmentName', 'Department Name', required=True, column='department_name'),
        FieldSpec('departmentDescription', 'Description', 'textarea', column='department_description'),
        FieldSpec('departmentHeadEmpId', 'Department Head', 'select', column='department_head_emp_id',
                  options_source='employees', option_label='name'),
        FieldSpec('location', 'Location'),
        FieldSpec('employeesCount', 'Employees', 'int', column='employees_count', default=0),
        FieldSpec('budget', 'Budget', 'number', default=0.0),
    ],
    search_columns=['department_name', 'department_code', 'location'],
    filters=[_status_filter()],
    columns={
        'department_code': 'Code',
        'department_name': 'Department',
        'location': 'Location',
        'employees_count': 'Employees',
        'budget': 'Budget',
        'status_label': 'Status',
    },
    stats=_active_stats('Departments', '🏬'),
)


# ==================== Stock Transactions ====================

VENDOR_RECEIPTS = ResourceSpec(
    key='vendor_receipts',
    title='Vendor Receipts',
    icon='📥',
    group=GROUP_STOCK,
    list_path='vendor-stock-receipts/get-all/{token}',
    add_path='vendor-stock-receipts/add',
    status_column=None,
    name_column='grn_number',
    fields=[
        FieldSpec('vendorId', 'Vendor', 'select', required=True, column='vendor_id',
                  options_source='vendors', option_label='vendor_name'),
        FieldSpec('poId', 'Purchase Order', 'select', column='po_id',
                  options_source='purchase_orders', option_label='po_number'),
        FieldSpec('poNumber', 'PO Number', column='po_number'),
        FieldSpec('grnNumber', 'GRN Number', required=True, column='grn_number'),
        FieldSpec('invoiceNumber', 'Invoice Number', required=True, column='invoice_number'),
        FieldSpec('invoiceDate', 'Invoice Date', 'date', required=True, column='invoice_date'),
        FieldSpec('receivedDate', 'Received Date', 'date', required=True, column='received_date'),
        FieldSpec('receivedByEmployeeId', 'Received By', 'select', required=True,
                  column='received_by_employee_id', options_source='employees', option_label='name'),
        FieldSpec('transportDetails', 'Transport Details', column='transport_details'),
        FieldSpec('notes', 'Notes', 'textarea'),
        FieldSpec('items', 'Items (JSON)', 'json', required=True,
                  help='[{"raw_material_id": 1, "received_qty": 10, "unit_cost": 5.5, '
                       '"batch_number": "B-1", "expiry_date": null}]'),
    ],
    search_columns=['grn_number', 'invoice_number', 'vendor_name', 'po_number'],
    filters=[FilterSpec('vendor_name', 'Vendor')],
    columns={
        'grn_number': 'GRN',
        'invoice_number': 'Invoice',
        'vendor_name': 'Vendor',
        'po_number': 'PO No',
        'received_date': 'Received',
    },
    stats=[
        StatSpec('Receipts', 'count', icon='📥'),
        StatSpec('This Month', 'this_month', column='received_date', icon='📅'),
    ],
    related=RelatedSpec(
        'Received Items',
        None,
        list_key='items',
        columns={
            'material_name': 'Material',
            'batch_number': 'Batch',
            'received_qty': 'Qty',
            'unit_cost': 'Unit Cost',
            'total_cost': 'Total',
            'expiry_date': 'Expiry',
        },
    ),
)

PRODUCTION_RECEIPTS = ResourceSpec(
    key='production_receipts',
    title='Production Receipts',
    icon='🏭',
    group=GROUP_STOCK,
    list_path='production-receipts/get-all/{token}',
    add_path='production-receipts/receive',
    update_path='production-receipts/update',
    status_column=None,
    name_column='sku_product_name',
    fields=[
        FieldSpec('productionBatchId', 'Production Batch', 'select', required=True,
                  column='production_batch_id', options_source='production_batches',
                  option_label='batch_code'),
        FieldSpec('quantity', 'Received Quantity', 'number', required=True, column='received_qty'),
        FieldSpec('storageLocationId', 'Storage Location', 'select', required=True,
                  column='storage_location_id', options_source='stock_locations',
                  option_label='location_label'),
        FieldSpec('notes', 'Notes', 'textarea'),
    ],
    search_columns=['sku_product_name', 'production_code', 'notes'],
    columns={
        'sku_product_name': 'Product',
        'production_code': 'Batch',
        'received_qty': 'Qty',
        'sku_id': 'SKU',
        'created_at': 'Received',
        'notes': 'Notes',
    },
    stats=[
        StatSpec('Receipts', 'count', icon='🏭'),
        StatSpec('Units Received', 'sum', column='received_qty', icon='📦'),
        StatSpec('This Month', 'this_month', column='created_at', icon='📅'),
    ],
)

FG_STOCK_ADJUSTMENTS = ResourceSpec(
    key='fg_stock_adjustments',
    title='FG Stock Adjustments',
    icon='⚖️',
    group=GROUP_STOCK,
    list_path='finished-goods/get-fg-stock-adjustments/{token}',
    add_path='finished-goods/stock-adjust',
    status_column=None,
    name_column='finished_good_name',
    fields=[
        FieldSpec('finishedGoodId', 'Finished Good', 'select', required=True,
                  column='finished_good_id', options_source='finished_goods',
                  option_label='product_name'),
        FieldSpec('adjustmentType', 'Adjustment Type', 'select', required=True,
                  column='adjustment_type', options=['increase', 'decrease'], default='increase'),
        FieldSpec('adjustmentQty', 'Quantity', 'number', required=True, column='adjustment_qty'),
        FieldSpec('reason', 'Reason', required=True),
        FieldSpec('notes', 'Notes', 'textarea'),
    ],
    search_columns=['finished_good_name', 'reason', 'notes'],
    filters=[FilterSpec('adjustment_type', 'Type', ['increase', 'decrease'])],
    columns={
        'finished_good_name': 'Product',
        'created_at': 'Date',
        'adjustment_type': 'Type',
        'reason': 'Reason',
        'adjustment_qty': 'Qty',
        'notes': 'Notes',
    },
    stats=[
        StatSpec('Adjustments', 'count', icon='⚖️'),
        StatSpec('Increases', 'equals', column='adjustment_type', value='increase', icon='⬆️'),
        StatSpec('Decreases', 'equals', column='adjustment_type', value='decrease', icon='⬇️'),
    ],
)


# ==================== Master Data ====================

BRANDS = ResourceSpec(
    key='brands',
    title='Brands',
    icon='🏷️',
    group=GROUP_MASTER,
    list_path='brands/get-brands/{token}',
    add_path='brands/add-brand',
    update_path='brands/update-brand',
    status_path='brands/change-brand-status/{id}/{status}/{token}',
    details_path='brands/get-brand-details/{id}/{token}',
    id_param='brandId',
    name_column='brand_name',
    fields=[
        FieldSpec('brandName', 'Brand Name', required=True, column='brand_name'),
        FieldSpec('brandCode', 'Brand Code', required=True, column='brand_code'),
    ],
    search_columns=['brand_name', 'brand_code'],
    filters=[_status_filter()],
    columns={'brand_code': 'Code', 'brand_name': 'Brand', 'status_label': 'Status'},
    stats=_active_stats('Brands', '🏷️'),
)

PRODUCT_CATEGORIES = ResourceSpec(
    key='product_categories',
    title='Product Categories',
    icon='🗂️',
    group=GROUP_MASTER,
    list_path='product-categories/get-categories/{token}',
    add_path='product-categories/add-category',
    update_path='product-categories/update-category',
    status_path='product-categories/change-category-status/{id}/{status}/{token}',
    id_param='categoryId',
    name_column='product_category_name',
    fields=[
        FieldSpec('productCategoryName', 'Category Name', required=True, column='product_category_name'),
        FieldSpec('productDescription', 'Description', 'textarea', column='product_description'),
    ],
    search_columns=['product_category_name', 'product_description'],
    filters=[_status_filter()],
    columns={
        'product_category_name': 'Category',
        'product_description': 'Description',
        'status_label': 'Status',
    },
    stats=_active_stats('Product Categories', '🗂️'),
    related=RelatedSpec(
        'Products',
        'product-categories/get-products-by-category/{id}/{token}',
        columns={'sku_code': 'SKU', 'product_name': 'Product'},
    ),
)

RAW_MATERIAL_CATEGORIES = ResourceSpec(
    key='raw_material_categories',
    title='Raw Material Categories',
    icon='🧩',
    group=GROUP_MASTER,
    list_path='raw-material-categories/get-categories/{token}',
    add_path='raw-material-categories/add-category',
    update_path='raw-material-categories/update-category',
    status_path='raw-material-categories/change-category-status/{id}/{status}/{token}',
    details_path='raw-material-categories/get-category-details/{id}/{token}',
    id_param='categoryId',
    name_column='category_name',
    fields=[
        FieldSpec('categoryName', 'Category Name', required=True, column='category_name'),
        FieldSpec('categoryDescription', 'Description', 'textarea', column='category_description'),
    ],
    search_columns=['category_name', 'category_description'],
    filters=[_status_filter()],
    columns={'category_name': 'Category', 'category_description': 'Description', 'status_label': 'Status'},
    stats=_active_stats('Material Categories', '🧩'),
    related=RelatedSpec(
        'Materials',
        'raw-material-categories/get-materials-by-category/{id}/{token}',
        columns={'material_code': 'Code', 'material_name': 'Material', 'stock_qty': 'Stock'},
    ),
)

PRODUCT_SKUS = ResourceSpec(
    key='product_skus',
    title='Product SKUs',
    icon='🔖',
    group=GROUP_MASTER,
    **_standard_paths('product-skus'),
    id_param='productId',
    name_column='product_name',
    fields=[
        FieldSpec('productName', 'Product Name', required=True, column='product_name'),
        FieldSpec('productDescription', 'Description', 'textarea', column='product_description'),
        FieldSpec('brandId', 'Brand', 'select', required=True, column='brand_id',
                  options_source='brands', option_label='brand_name'),
        FieldSpec('productCategoryId', 'Category', 'select', required=True, column='product_category_id',
                  options_source='product_categories', option_label='product_category_name'),
        FieldSpec('rawMaterials', 'Bill of Materials (JSON)', 'json', column='raw_materials',
                  help='[{"raw_material_id": 1, "quantity": 2}]'),
    ],
    search_columns=['product_name', 'sku_code', 'brand_name'],
    filters=[_status_filter(), FilterSpec('brand_name', 'Brand')],
    columns={
        'sku_code': 'SKU',
        'product_name': 'Product',
        'brand_name': 'Brand',
        'product_category_name': 'Category',
        'status_label': 'Status',
    },
    stats=_active_stats('Product SKUs', '🔖'),
)

STOCK_LOCATIONS = ResourceSpec(
    key='stock_locations',
    title='Stock Locations',
    icon='📍',
    group=GROUP_MASTER,
    list_path='locations/get-all/{token}',
    add_path='locations/bulk-create',
    update_path='locations/update',
    id_param='location_id',
    name_column='location_label',
    fields=[
        FieldSpec('aisle_no', 'Aisle', required=True),
        FieldSpec('num_racks', 'Number of Racks', 'int', required=True, default=1, modes=(CREATE,)),
        FieldSpec('num_rows_per_rack', 'Rows per Rack', 'int', required=True, default=1, modes=(CREATE,)),
        FieldSpec('rack_no', 'Rack', required=True, modes=(UPDATE,)),
        FieldSpec('row_no', 'Row / Shelf', required=True, modes=(UPDATE,)),
        FieldSpec('capacity', 'Capacity (units)', 'int', required=True, default=0),
        FieldSpec('status', 'Status', 'select', options=['1', '0'], default='1', modes=(UPDATE,)),
    ],
    search_columns=['location_label', 'aisle_no', 'rack_no'],
    filters=[_status_filter(), FilterSpec('aisle_no', 'Aisle')],
    columns={
        'location_label': 'Location',
        'aisle_no': 'Aisle',
        'rack_no': 'Rack',
        'row_no': 'Row',
        'capacity': 'Capacity',
        'current_occupancy_units': 'Occupied',
        'status_label': 'Status',
    },
    stats=_active_stats('Locations', '📍') + [
        StatSpec('Total Capacity', 'sum', column='capacity', icon='📦'),
    ],
)

UNITS = ResourceSpec(
    key='units',
    title='Units of Measurement',
    icon='📏',
    group=GROUP_MASTER,
    list_path='units/get-units/{token}',
    add_path='units/add-unit',
    update_path='units/update-unit',
    status_path='units/change-unit-status/{id}/{status}/{token}',
    id_param='unitId',
    name_column='unit_name',
    fields=[
        FieldSpec('unitName', 'Unit Name', required=True, column='unit_name'),
        FieldSpec('unitCode', 'Unit Code', required=True, column='unit_code'),
    ],
    search_columns=['unit_name', 'unit_code'],
    filters=[_status_filter()],
    columns={'unit_code': 'Code', 'unit_name': 'Unit', 'status_label': 'Status'},
    stats=_active_stats('Units', '📏'),
)

PAYMENT_TERMS = ResourceSpec(
    key='payment_terms',
    title='Payment Terms',
    icon='💳',
    group=GROUP_MASTER,
    list_path='payment-terms/get-payment-terms/{token}',
    add_path='payment-terms/add-payment-term',
    update_path='payment-terms/update-payment-term',
    status_path='payment-terms/change-payment-term-status/{id}/{status}/{token}',
    id_param='paymentTermId',
    name_column='term_name',
    fields=[FieldSpec('termName', 'Term Name', required=True, column='term_name')],
    search_columns=['term_name'],
    filters=[_status_filter()],
    columns={'term_name': 'Payment Term', 'status_label': 'Status'},
    stats=_active_stats('Payment Terms', '💳'),
)

CLIENT_TYPES = ResourceSpec(
    key='client_types',
    title='Client Types',
    icon='🪪',
    group=GROUP_MASTER,
    list_path='client-types/get-client-types/{token}',
    add_path='client-types/add-client-type',
    update_path='client-types/update-client-type',
    status_path='client-types/change-client-type-status/{id}/{status}/{token}',
    id_param='clientTypeId',
    name_column='type_name',
    fields=[FieldSpec('typeName', 'Type Name', required=True, column='type_name')],
    search_columns=['type_name'],
    filters=[_status_filter()],
    columns={'type_name': 'Client Type', 'status_label': 'Status'},
    stats=_active_stats('Client Types', '🪪'),
)

PRODUCTION_STAGES = ResourceSpec(
    key='production_stages',
    title='Production Stages',
    icon='⚙️',
    group=GROUP_MASTER,
    **_standard_paths('production-stages'),
    details_path='production-stages/get-details/{id}/{token}',
    id_param='stageId',
    name_column='stage_name',
    fields=[
        FieldSpec('stageName', 'Stage Name', required=True, column='stage_name'),
        FieldSpec('stageHeadEmployeeId', 'Stage Head', 'select', required=True,
                  column='stage_head_employee_id', options_source='employees', option_label='name'),
        FieldSpec('stageEmployees', 'Stage Employees (JSON)', 'json', column='stage_employees',
                  help='[3, 7, 12]'),
    ],
    search_columns=['stage_name', 'stage_head_name'],
    filters=[_status_filter()],
    columns={'stage_name': 'Stage', 'stage_head_name': 'Head', 'status_label': 'Status'},
    stats=_active_stats('Stages', '⚙️'),
)

PRODUCTION_STAGE_CATEGORIES = ResourceSpec(
    key='production_stage_categories',
    title='Production Stage Categories',
    icon='🧭',
    group=GROUP_MASTER,
    **_standard_paths('production-stage-categories'),
    id_param='categoryId',
    name_column='category_name',
    fields=[
        FieldSpec('categoryName', 'Category Name', required=True, column='category_name'),
        FieldSpec('stages', 'Stages (JSON)', 'json', required=True, help='[1, 2, 5]'),
    ],
    search_columns=['category_name'],
    filters=[_status_filter()],
    columns={'category_name': 'Category', 'status_label': 'Status'},
    stats=_active_stats('Stage Categories', '🧭'),
)


# ==================== Administration ====================

ADMIN_USERS = ResourceSpec(
    key='admin_users',
    title='Admin Users',
    icon='🛡️',
    group=GROUP_ADMIN,
    list_path='admin-users/get-all-Admin-users/{token}',
    add_path='admin-users/add',
    update_path='admin-users/update-admin-user',
    status_path='admin-users/change-status/{id}/{status}/{token}',
    id_param='adminUserId',
    name_column='username',
    fields=[
        FieldSpec('username', 'Username', required=True),
        FieldSpec('email', 'Email', 'email', required=True),
        FieldSpec('password', 'Password', required=True, column='__password__', modes=(CREATE,)),
        FieldSpec('role_id', 'Role', 'select', required=True,
                  options_source='admin_roles', option_label='role_name'),
    ],
    search_columns=['username', 'email', 'role_name'],
    filters=[_status_filter(), FilterSpec('role_name', 'Role')],
    columns={'username': 'Username', 'email': 'Email', 'role_name': 'Role', 'status_label': 'Status'},
    stats=_active_stats('Admin Users', '🛡️'),
)

ADMIN_ROLES = ResourceSpec(
    key='admin_roles',
    title='Admin Roles',
    icon='🔐',
    group=GROUP_ADMIN,
    **_standard_paths('admin-roles'),
    id_param='roleId',
    name_column='role_name',
    fields=[
        FieldSpec('role_name', 'Role Name', required=True),
        FieldSpec('description', 'Description', 'textarea'),
        FieldSpec('page_access', 'Page Access (JSON)', 'json', help='[1, 2, 3]'),
    ],
    search_columns=['role_name', 'description'],
    filters=[_status_filter()],
    columns={'role_name': 'Role', 'description': 'Description', 'status_label': 'Status'},
    stats=_active_stats('Roles', '🔐'),
)


# ==================== Registry ====================

_REGISTRY: Dict[str, ResourceSpec] = {
    spec.key: spec for spec in [
        CLIENTS, VENDORS, RAW_MATERIALS, FINISHED_GOODS, PURCHASE_ORDERS, ORDERS,
        PRODUCTION_BATCHES, DISPATCH_ORDERS, QC_RECORDS, DEFECT_TYPES,
        EMPLOYEES, DEPARTMENTS,
        VENDOR_RECEIPTS, PRODUCTION_RECEIPTS, FG_STOCK_ADJUSTMENTS,
        BRANDS, PRODUCT_CATEGORIES, RAW_MATERIAL_CATEGORIES, PRODUCT_SKUS,
        STOCK_LOCATIONS, UNITS, PAYMENT_TERMS, CLIENT_TYPES,
        PRODUCTION_STAGES, PRODUCTION_STAGE_CATEGORIES,
        ADMIN_USERS, ADMIN_ROLES,
    ]
}


def get_resource(key: str) -> ResourceSpec:
    """Look up a resource by key; raises KeyError for unknown keys"""
    try:
        return _REGISTRY[key]
    except KeyError:
        raise KeyError(f"Unknown resource: {key}") from None


def list_resources(group: Optional[str] = None) -> List[ResourceSpec]:
    return [spec for spec in _REGISTRY.values() if group is None or spec.group == group]
