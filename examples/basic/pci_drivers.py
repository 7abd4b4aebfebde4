"""Walk a nested driver table without building a tree."""

from parenscan import GroupCursor, open_document

SOURCE = b"""(pci-drivers
\t(1af4 ; Red Hat
\t\t(1000 "drivers/pci/virtio/net")
\t\t(1001 "drivers/pci/virtio/blk"))
\t(8086 ; Intel
\t\t(1616 "drivers/pci/intel/hd graphics")))
"""

with open_document(SOURCE) as doc:
    table = doc.cursor().next_group()
    print("table:", bytes(table.next_text()).decode())
    for vendor in table:
        if not isinstance(vendor, GroupCursor):
            continue
        vendor_id = bytes(vendor.next_text()).decode()
        for device in vendor:
            device_id = bytes(device.next_text()).decode()
            path = bytes(device.next_text()).decode()
            print(f"  {vendor_id}:{device_id} -> {path}")

if doc.error is not None:
    raise doc.error
