"""Thai customer-facing messages for the lead intake flow."""


class UserMessagesTH:
    """Centralized Thai customer-facing messages."""

    # Blocking alert shown when the submission could not be sent
    SUBMISSION_FAILED = "เกิดข้อผิดพลาดในการส่งข้อมูล กรุณาลองใหม่อีกครั้ง"

    SUBMISSION_SUCCEEDED = "ขอบคุณสำหรับข้อมูล เจ้าหน้าที่จะติดต่อกลับโดยเร็วที่สุด"

    @staticmethod
    def missing_other_fields(field_names: list[str]) -> str:
        """Ask for the free-text fields required by an "Other" choice."""
        return "กรุณาระบุรายละเอียดเพิ่มเติม: " + ", ".join(field_names)


# Plain-text liveness reply of the lead router
ROUTER_LIVENESS_TEXT = "SCG Customer Screening Data Handler is running!"
