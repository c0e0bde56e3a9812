#!/usr/bin/env python3
"""
Gerenciamento de listas de email do Smartmessages.

Uso:
    python manageLists.py --listar-listas
    python manageLists.py --exportar 123 --saida lista.csv
    python manageLists.py --upload 123 --arquivo contatos.csv --origem "Formulario do site"
    python manageLists.py --status-upload 123 456
    python manageLists.py --help
"""

import argparse
from pathlib import Path

from smartmessages_lib import ServiceError, SmartmessagesClient
from smartmessages_lib.utils import save_text, timestamp_str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Gerenciamento de listas de email do Smartmessages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemplos:
  python manageLists.py --listar-listas --todas
  python manageLists.py --exportar 123
  python manageLists.py --exportar 123 --saida ./exports/lista.csv
  python manageLists.py --upload 123 --arquivo contatos.csv --origem "Evento 2024" --cabecalho
  python manageLists.py --status-upload 123 456
        """
    )

    parser.add_argument("--listar-listas", action="store_true", help="Listar listas da conta")
    parser.add_argument("--todas", action="store_true", help="Incluir listas ocultas")

    parser.add_argument("--exportar", type=int, metavar="LISTA", help="Exportar lista em CSV")
    parser.add_argument("--saida", type=str, help="Arquivo de saida (default: ./exports/lista_<id>_<timestamp>.csv)")

    parser.add_argument("--upload", type=int, metavar="LISTA", help="Enviar arquivo CSV para a lista")
    parser.add_argument("--arquivo", type=str, help="Arquivo CSV (ou zip) a enviar")
    parser.add_argument("--origem", type=str, help="Origem dos contatos (obrigatorio para auditoria)")
    parser.add_argument("--definitivo", action="store_true", help="Sobrescrever dados existentes")
    parser.add_argument("--substituir", action="store_true", help="Esvaziar a lista antes do upload")
    parser.add_argument("--cabecalho", action="store_true", help="Primeira linha contem nomes de campos")

    parser.add_argument("--status-upload", type=int, nargs=2, metavar=("LISTA", "UPLOAD"),
                        help="Consultar status de um upload")

    parser.add_argument("--debug", action="store_true", help="Modo debug")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    acoes = (args.exportar, args.upload, args.status_upload)
    if not args.listar_listas and all(acao is None for acao in acoes):
        parser.print_help()
        return 1

    sm = SmartmessagesClient(debug=args.debug)

    try:
        try:
            sm.login()
        except ServiceError as e:
            print(f"Falha no login: {e}")
            print("O arquivo .env deve conter:")
            print("  SMARTMESSAGES_USER=seu_email")
            print("  SMARTMESSAGES_PASSWORD=sua_senha")
            print("  SMARTMESSAGES_APIKEY=sua_chave")
            return 1

        if args.listar_listas:
            listas = sm.get_lists(show_all=args.todas)
            itens = listas.values() if isinstance(listas, dict) else (listas or [])
            print("\n=== LISTAS ===")
            for lista in itens:
                print(f"  [{lista.get('id')}] {lista.get('name')}: {lista.get('description', '')}")

        if args.exportar is not None:
            csv_data = sm.get_list(args.exportar, as_csv=True)
            saida = Path(args.saida) if args.saida else (
                Path("./exports") / f"lista_{args.exportar}_{timestamp_str()}.csv"
            )
            save_text(csv_data, saida)
            print(f"Lista {args.exportar} exportada: {saida}")

        if args.upload is not None:
            upload_id = sm.upload_list(
                args.upload,
                args.arquivo,
                args.origem,
                definitive=args.definitivo,
                replace=args.substituir,
                field_order_first_line=args.cabecalho,
            )
            print(f"Upload enviado: id {upload_id}")
            print(f"Acompanhe com: python manageLists.py --status-upload {args.upload} {upload_id}")

        if args.status_upload is not None:
            lista_id, upload_id = args.status_upload
            info = sm.get_upload_info(lista_id, upload_id)
            print(f"\n=== UPLOAD {upload_id} ===")
            for chave, valor in (info or {}).items():
                print(f"  {chave}: {valor}")

        return 0

    except ServiceError as e:
        print(f"Erro: {e}")
        return 1

    finally:
        sm.close()


if __name__ == "__main__":
    raise SystemExit(main())
