from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Dict, Optional

import qrcode
from PIL import Image

QR_SIZE_PX = 400
QR_BORDER = 2


@dataclass(frozen=True)
class CryptoOption:
    key: str
    name: str
    network: str
    address: str
    button_label: str
    emoji: str


_OPTIONS = [
    CryptoOption("bitcoin", "Bitcoin (BTC)", "Bitcoin Network",
                 "bc1qcpradle8w4p5r4thldcudjsyde3qa0uk66j2kx", "Bitcoin (BTC)", "🪙"),
    CryptoOption("ethereum", "Ethereum (ETH)", "Ethereum Network",
                 "0x5f7b76c0825fc9b26ba13088e834804a15ae4b12", "Ethereum (ETH)", "🔷"),
    CryptoOption("litecoin", "Litecoin (LTC)", "Litecoin Network",
                 "ltc1qcjk32rhmw9t5hazj72qlhlu6amsd5z9gkxwcnv", "Litecoin (LTC)", "⛏️"),
    CryptoOption("usdt_trc20", "USDT (Tether)", "TRC20 (Tron Network)",
                 "TFGcWZsE2zRyHXBUtuZSCBqpjZAwEo3YY3", "USDT (TRC20)", "💵"),
    CryptoOption("usdt_erc20", "USDT (Tether)", "ERC20 (Ethereum Network)",
                 "0x468c2838e64a3fa1c6b3683d0494a20eedf07e29", "USDT (ERC20)", "💵"),
    CryptoOption("dogecoin", "Dogecoin (DOGE)", "Dogecoin Network",
                 "DU6bMjG25Kcg7qu9DYT66N4YDf8oJjnUpt", "Dogecoin (DOGE)", "🐶"),
    CryptoOption("solana", "Solana (SOL)", "Solana Network",
                 "3UTimbRKjAYCnJnNTN7hS17a9esNQs5jP7RkJgpyniZ5", "Solana (SOL)", "💵"),
    CryptoOption("nano", "Nano (NANO)", "Nano Network",
                 "nano_1b15trz5bbpseeob71wuq37mm36bewq377tyeu83ndzacgdqpzw9eh1fkxoj", "Nano (XNO)", "💵"),
    CryptoOption("pepecoin", "Pepecoin (PEPE)", "Pepecoin Network",
                 "PmzT8BUhqWzavKVSwBbA9KuHojrvmGj7VD", "Pepecoin (PEPE)", "🐸"),
]

# insertion order is the button order
DONATION_OPTIONS: Dict[str, CryptoOption] = {o.key: o for o in _OPTIONS}


def get_option(key: str) -> Optional[CryptoOption]:
    return DONATION_OPTIONS.get(key)


def render_qr(address: str) -> bytes:
    """Encode an address as a black-on-white 400x400 PNG."""
    qr = qrcode.QRCode(border=QR_BORDER, box_size=10)
    qr.add_data(address)
    qr.make(fit=True)
    img = qr.make_image(fill_color="#000000", back_color="#FFFFFF").get_image()
    img = img.convert("RGB").resize((QR_SIZE_PX, QR_SIZE_PX), Image.NEAREST)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
