from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    github_user: str = ""
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    github_per_page: int = 100
    request_timeout: float = 30.0
    output_path: str = "projects.json"
    manifest_path: str = "projects.json"
    # 設定後改由 HTTP 取得 manifest（否則讀本地檔案）
    manifest_url: str = ""
    placeholder_image: str = "/static/placeholder_light_gray_block.svg"
    untitled_label: str = "Untitled project"
    date_label_prefix: str = "Updated"
    # manifest 載入失敗時是否在頁面上顯示錯誤
    show_load_error: bool = False
    site_title: str = "Projects"

    def manifest_is_remote(self) -> bool:
        return self.manifest_url.startswith(("http://", "https://"))

    model_config = {"env_prefix": "", "case_sensitive": False}


settings = Settings()
